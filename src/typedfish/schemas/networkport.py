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
"""NetworkPort: a discrete physical port of a network adapter"""

#---------Imports---------

from typedfish.common.entity import Entity, Link, Property, Record
from typedfish.common.types import Status

#---------End of imports---------

class FlowControl(object):
    NONE = 'None'
    TX = 'TX'
    RX = 'RX'
    TX_RX = 'TX_RX'

class LinkNetworkTechnology(object):
    ETHERNET = 'Ethernet'
    INFINIBAND = 'InfiniBand'
    FIBRE_CHANNEL = 'FibreChannel'

class LinkStatus(object):
    DOWN = 'Down'
    UP = 'Up'
    STARTING = 'Starting'
    TRAINING = 'Training'

class PortConnectionType(object):
    NOT_CONNECTED = 'NotConnected'
    NPORT = 'NPort'
    POINT_TO_POINT = 'PointToPoint'
    PRIVATE_LOOP = 'PrivateLoop'
    PUBLIC_LOOP = 'PublicLoop'
    GENERIC = 'Generic'
    EXTENDER_FABRIC = 'ExtenderFabric'

class SupportedEthernetCapabilities(object):
    WAKE_ON_LAN = 'WakeOnLAN'
    EEE = 'EEE'

class NetDevFuncMaxBWAlloc(Record):
    max_bw_alloc_percent = Property('MaxBWAllocPercent', 0)
    network_device_function = Link('NetworkDeviceFunction')

class NetDevFuncMinBWAlloc(Record):
    min_bw_alloc_percent = Property('MinBWAllocPercent', 0)
    network_device_function = Link('NetworkDeviceFunction')

class SupportedLinkCapabilities(Record):
    auto_speed_negotiation = Property('AutoSpeedNegotiation', False)
    capable_link_speed_mbps = Property('CapableLinkSpeedMbps', islist=True)
    link_network_technology = Property('LinkNetworkTechnology', '')

class NetworkPort(Entity):
    readwrite_fields = (
        'ActiveLinkTechnology',
        'CurrentLinkSpeedMbps',
        'EEEEnabled',
        'FlowControlConfiguration',
        'WakeOnLANEnabled',
    )

    actions = Property('Actions', {})
    active_link_technology = Property('ActiveLinkTechnology', '')
    associated_network_addresses = Property('AssociatedNetworkAddresses', \
                                                                islist=True)
    current_link_speed_mbps = Property('CurrentLinkSpeedMbps', 0)
    eee_enabled = Property('EEEEnabled', False)
    fc_fabric_name = Property('FCFabricName', '')
    fc_port_connection_type = Property('FCPortConnectionType', '')
    flow_control_configuration = Property('FlowControlConfiguration', '')
    flow_control_status = Property('FlowControlStatus', '')
    link_status = Property('LinkStatus', '')
    max_frame_size = Property('MaxFrameSize', 0)
    net_dev_func_max_bw_alloc = Property('NetDevFuncMaxBWAlloc', \
                                        cls=NetDevFuncMaxBWAlloc, islist=True)
    net_dev_func_min_bw_alloc = Property('NetDevFuncMinBWAlloc', \
                                        cls=NetDevFuncMinBWAlloc, islist=True)
    number_discovered_remote_ports = Property('NumberDiscoveredRemotePorts', 0)
    physical_port_number = Property('PhysicalPortNumber', '')
    port_maximum_mtu = Property('PortMaximumMTU', 0)
    signal_detected = Property('SignalDetected', False)
    status = Property('Status', cls=Status)
    supported_ethernet_capabilities = Property(\
                                'SupportedEthernetCapabilities', islist=True)
    supported_link_capabilities = Property('SupportedLinkCapabilities', \
                                    cls=SupportedLinkCapabilities, islist=True)
    vendor_id = Property('VendorId', '')
    wake_on_lan_enabled = Property('WakeOnLANEnabled', False)

def get_network_port(client, uri):
    """Get a NetworkPort instance from the service"""
    return NetworkPort.get(client, uri)

def list_referenced_network_ports(client, link):
    """Get every NetworkPort of the collection at ``link``"""
    return NetworkPort.list_referenced(client, link)
