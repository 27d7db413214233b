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
"""Drive: a disk or other physical storage medium"""

#---------Imports---------

from typedfish.common.entity import Entity, Link, Property, Record
from typedfish.common.types import Identifier, Status

#---------End of imports---------

class DataSanitizationType(object):
    """How a drive is sanitized by the SecureErase action"""
    BLOCK_ERASE = 'BlockErase'
    CRYPTOGRAPHIC_ERASE = 'CryptographicErase'
    OVERWRITE = 'Overwrite'

class EncryptionAbility(object):
    NONE = 'None'
    SELF_ENCRYPTING_DRIVE = 'SelfEncryptingDrive'
    OTHER = 'Other'

class EncryptionStatus(object):
    UNECRYPTED = 'Unecrypted'
    UNLOCKED = 'Unlocked'
    LOCKED = 'Locked'
    FOREIGN = 'Foreign'
    UNENCRYPTED = 'Unencrypted'

class HotspareReplacementModeType(object):
    """Whether a commissioned hot spare reverts once the failed drive is
    replaced"""
    REVERTIBLE = 'Revertible'
    NON_REVERTIBLE = 'NonRevertible'

class HotspareType(object):
    NONE = 'None'
    GLOBAL = 'Global'
    CHASSIS = 'Chassis'
    # reported only; clients cannot set it
    DEDICATED = 'Dedicated'

class MediaType(object):
    HDD = 'HDD'
    SSD = 'SSD'
    SMR = 'SMR'

class StatusIndicator(object):
    OK = 'OK'
    FAIL = 'Fail'
    REBUILD = 'Rebuild'
    PREDICTIVE_FAILURE_ANALYSIS = 'PredictiveFailureAnalysis'
    HOTSPARE = 'Hotspare'
    IN_A_CRITICAL_ARRAY = 'InACriticalArray'
    IN_A_FAILED_ARRAY = 'InAFailedArray'

class Operations(Record):
    """An operation currently running on the drive"""
    associated_task = Link('AssociatedTask')
    operation_name = Property('OperationName', '')
    percentage_complete = Property('PercentageComplete', 0)

class DriveLinks(Record):
    chassis = Link('Chassis')
    endpoints = Link('Endpoints', islist=True)
    network_device_functions = Link('NetworkDeviceFunctions', islist=True)
    pcie_functions = Link('PCIeFunctions', islist=True)
    storage = Link('Storage')
    storage_pools = Link('StoragePools', islist=True)
    volumes = Link('Volumes', islist=True)
    oem = Property('Oem', {})

class Drive(Entity):
    """A drive or other physical storage medium.

    Writable members are listed in ``readwrite_fields``; set the matching
    attributes and call :meth:`update` to send them.
    """
    readwrite_fields = (
        'AssetTag',
        'HotspareReplacementMode',
        'HotspareType',
        'LocationIndicatorActive',
        'ReadyToRemove',
        'StatusIndicator',
        'WriteCacheEnabled',
    )

    actions = Property('Actions', {})
    assembly = Link('Assembly')
    asset_tag = Property('AssetTag', '')
    block_size_bytes = Property('BlockSizeBytes', 0)
    capable_speed_gbs = Property('CapableSpeedGbs', 0.0)
    capacity_bytes = Property('CapacityBytes', 0)
    certificates = Link('Certificates')
    encryption_ability = Property('EncryptionAbility', '')
    encryption_status = Property('EncryptionStatus', '')
    environment_metrics = Link('EnvironmentMetrics')
    failure_predicted = Property('FailurePredicted', False)
    hotspare_replacement_mode = Property('HotspareReplacementMode', '')
    hotspare_type = Property('HotspareType', '')
    identifiers = Property('Identifiers', cls=Identifier, islist=True)
    links = Property('Links', cls=DriveLinks)
    location_indicator_active = Property('LocationIndicatorActive', False)
    manufacturer = Property('Manufacturer', '')
    media_type = Property('MediaType', '')
    model = Property('Model', '')
    multipath = Property('Multipath', False)
    negotiated_speed_gbs = Property('NegotiatedSpeedGbs', 0.0)
    operations = Property('Operations', cls=Operations, islist=True)
    part_number = Property('PartNumber', '')
    physical_location = Property('PhysicalLocation', {})
    predicted_media_life_left_percent = Property(\
                                            'PredictedMediaLifeLeftPercent', 0.0)
    protocol = Property('Protocol', '')
    ready_to_remove = Property('ReadyToRemove', False)
    revision = Property('Revision', '')
    rotation_speed_rpm = Property('RotationSpeedRPM', 0.0)
    sku = Property('SKU', '')
    serial_number = Property('SerialNumber', '')
    status = Property('Status', cls=Status)
    status_indicator = Property('StatusIndicator', '')
    write_cache_enabled = Property('WriteCacheEnabled', False)

    def volumes(self):
        """Return the volumes this drive is a member or spare of"""
        from typedfish.schemas.volume import Volume
        return self.get_linked(Volume, self.links.volumes)

def get_drive(client, uri):
    """Get a Drive instance from the service

    :param client: client to issue the request with.
    :type client: RestClientBase object.
    :param uri: URI of the drive.
    :type uri: str.
    :returns: returns a Drive object

    """
    return Drive.get(client, uri)

def list_referenced_drives(client, link):
    """Get every Drive of the collection at ``link``

    :param client: client to issue the requests with.
    :type client: RestClientBase object.
    :param link: URI of the collection.
    :type link: str.
    :returns: returns a list of Drive objects

    """
    return Drive.list_referenced(client, link)
