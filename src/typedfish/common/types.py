###
# Copyright 2016 Hewlett Packard Enterprise, Inc. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
###

# -*- coding: utf-8 -*-
"""Vocabularies and records shared by many Redfish schemas.

Enumerations are plain classes of string constants. Attributes that hold
them are ordinary strings, so values a service adds beyond these lists are
kept as they are.
"""

#---------Imports---------

from typedfish.common.entity import Property, Record

#---------End of imports---------

class State(object):
    """Resource.State"""
    ENABLED = 'Enabled'
    DISABLED = 'Disabled'
    STANDBY_OFFLINE = 'StandbyOffline'
    STANDBY_SPARE = 'StandbySpare'
    IN_TEST = 'InTest'
    STARTING = 'Starting'
    ABSENT = 'Absent'
    UNAVAILABLE_OFFLINE = 'UnavailableOffline'
    DEFERRING = 'Deferring'
    QUIESCED = 'Quiesced'
    UPDATING = 'Updating'
    QUALIFIED = 'Qualified'
    DEGRADED = 'Degraded'

class Health(object):
    """Resource.Health"""
    OK = 'OK'
    WARNING = 'Warning'
    CRITICAL = 'Critical'

class IndicatorLED(object):
    """Resource.IndicatorLED"""
    UNKNOWN = 'Unknown'
    LIT = 'Lit'
    BLINKING = 'Blinking'
    OFF = 'Off'

class DurableNameFormat(object):
    """Resource.DurableNameFormat"""
    NAA = 'NAA'
    IQN = 'iQN'
    FC_WWN = 'FC_WWN'
    UUID = 'UUID'
    EUI = 'EUI'
    NQN = 'NQN'
    NSID = 'NSID'
    NGUID = 'NGUID'
    MAC_ADDRESS = 'MACAddress'
    GCXLID = 'GCXLID'

class Protocol(object):
    """Protocol.Protocol"""
    PCIE = 'PCIe'
    AHCI = 'AHCI'
    UHCI = 'UHCI'
    SAS = 'SAS'
    SATA = 'SATA'
    USB = 'USB'
    NVME = 'NVMe'
    FC = 'FC'
    ISCSI = 'iSCSI'
    FCOE = 'FCoE'
    FCP = 'FCP'
    FICON = 'FICON'
    NVME_OVER_FABRICS = 'NVMeOverFabrics'
    SMB = 'SMB'
    NFSV3 = 'NFSv3'
    NFSV4 = 'NFSv4'
    HTTP = 'HTTP'
    HTTPS = 'HTTPS'
    FTP = 'FTP'
    SFTP = 'SFTP'
    IWARP = 'iWARP'
    ROCE = 'RoCE'
    ROCEV2 = 'RoCEv2'
    I2C = 'I2C'
    TCP = 'TCP'
    UDP = 'UDP'
    TFTP = 'TFTP'
    GENZ = 'GenZ'
    MULTI_PROTOCOL = 'MultiProtocol'
    INFINIBAND = 'InfiniBand'
    ETHERNET = 'Ethernet'
    NVLINK = 'NVLink'
    OEM = 'OEM'
    DISPLAY_PORT = 'DisplayPort'
    HDMI = 'HDMI'
    VGA = 'VGA'
    DVI = 'DVI'
    CXL = 'CXL'
    UPI = 'UPI'
    QPI = 'QPI'
    EMMC = 'eMMC'

class Status(Record):
    """Resource.Status"""
    state = Property('State', '')
    health = Property('Health', '')
    health_rollup = Property('HealthRollup', '')
    conditions = Property('Conditions', islist=True)
    oem = Property('Oem', {})

class Identifier(Record):
    """Resource.Identifier"""
    durable_name = Property('DurableName', '')
    durable_name_format = Property('DurableNameFormat', '')
