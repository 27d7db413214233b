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
"""Port: a port of a switch, controller, chassis or other device"""

#---------Imports---------

from typedfish.common.entity import Entity, Link, Property, Record
from typedfish.common.types import Status

#---------End of imports---------

class FiberConnectionType(object):
    SINGLE_MODE = 'SingleMode'
    MULTI_MODE = 'MultiMode'

class FlowControl(object):
    NONE = 'None'
    TX = 'TX'
    RX = 'RX'
    TX_RX = 'TX_RX'

class IEEE802IdSubtype(object):
    CHASSIS_COMP = 'ChassisComp'
    IF_ALIAS = 'IfAlias'
    PORT_COMP = 'PortComp'
    MAC_ADDR = 'MacAddr'
    NETWORK_ADDR = 'NetworkAddr'
    IF_NAME = 'IfName'
    AGENT_ID = 'AgentId'
    LOCAL_ASSIGN = 'LocalAssign'
    NOT_TRANSMITTED = 'NotTransmitted'

class LinkNetworkTechnology(object):
    ETHERNET = 'Ethernet'
    INFINIBAND = 'InfiniBand'
    FIBRE_CHANNEL = 'FibreChannel'
    GENZ = 'GenZ'

class LinkState(object):
    ENABLED = 'Enabled'
    DISABLED = 'Disabled'

class LinkStatus(object):
    LINK_UP = 'LinkUp'
    STARTING = 'Starting'
    TRAINING = 'Training'
    LINK_DOWN = 'LinkDown'
    NO_LINK = 'NoLink'

class MediumType(object):
    COPPER = 'Copper'
    FIBER_OPTIC = 'FiberOptic'

class PortConnectionType(object):
    NOT_CONNECTED = 'NotConnected'
    NPORT = 'NPort'
    POINT_TO_POINT = 'PointToPoint'
    PRIVATE_LOOP = 'PrivateLoop'
    PUBLIC_LOOP = 'PublicLoop'
    GENERIC = 'Generic'
    EXTENDER_FABRIC = 'ExtenderFabric'
    FPORT = 'FPort'
    EPORT = 'EPort'
    TEPORT = 'TEPort'
    NPPORT = 'NPPort'
    GPORT = 'GPort'
    NLPORT = 'NLPort'
    FLPORT = 'FLPort'
    EXPORT = 'EXPort'
    UPORT = 'UPort'
    DPORT = 'DPort'

class PortMedium(object):
    ELECTRICAL = 'Electrical'
    OPTICAL = 'Optical'

class PortType(object):
    UPSTREAM_PORT = 'UpstreamPort'
    DOWNSTREAM_PORT = 'DownstreamPort'
    INTERSWITCH_PORT = 'InterswitchPort'
    MANAGEMENT_PORT = 'ManagementPort'
    BIDIRECTIONAL_PORT = 'BidirectionalPort'
    UNCONFIGURED_PORT = 'UnconfiguredPort'

class SFPType(object):
    SFP = 'SFP'
    SFP_PLUS = 'SFPPlus'
    SFP28 = 'SFP28'
    CSFP = 'cSFP'
    SFPDD = 'SFPDD'
    QSFP = 'QSFP'
    QSFP_PLUS = 'QSFPPlus'
    QSFP14 = 'QSFP14'
    QSFP28 = 'QSFP28'
    QSFP56 = 'QSFP56'
    MINI_SAS_HD = 'MiniSASHD'

class ConfiguredNetworkLink(Record):
    configured_link_speed_gbps = Property('ConfiguredLinkSpeedGbps', 0.0)
    configured_width = Property('ConfiguredWidth', 0)

class LLDPExchange(Record):
    """LLDP data received from or transmitted to the link partner"""
    chassis_id = Property('ChassisId', '')
    chassis_id_subtype = Property('ChassisIdSubtype', '')
    management_address_ipv4 = Property('ManagementAddressIPv4', '')
    management_address_ipv6 = Property('ManagementAddressIPv6', '')
    management_address_mac = Property('ManagementAddressMAC', '')
    management_vlan_id = Property('ManagementVlanId', 0)
    port_id = Property('PortId', '')
    port_id_subtype = Property('PortIdSubtype', '')

class EthernetProperties(Record):
    associated_mac_addresses = Property('AssociatedMACAddresses', islist=True)
    eee_enabled = Property('EEEEnabled', False)
    flow_control_configuration = Property('FlowControlConfiguration', '')
    flow_control_status = Property('FlowControlStatus', '')
    lldp_enabled = Property('LLDPEnabled', False)
    lldp_receive = Property('LLDPReceive', cls=LLDPExchange)
    lldp_transmit = Property('LLDPTransmit', cls=LLDPExchange)
    wake_on_lan_enabled = Property('WakeOnLANEnabled', False)

class FibreChannelProperties(Record):
    associated_world_wide_names = Property('AssociatedWorldWideNames', \
                                                                islist=True)
    fabric_name = Property('FabricName', '')
    number_discovered_remote_ports = Property('NumberDiscoveredRemotePorts', 0)
    port_connection_type = Property('PortConnectionType', '')

class FunctionBandwidth(Record):
    allocation_percent = Property('AllocationPercent', 0)
    network_device_function = Link('NetworkDeviceFunction')

class GenZ(Record):
    lprt = Link('LPRT')
    mprt = Link('MPRT')
    vcat = Link('VCAT')

class InfiniBandProperties(Record):
    associated_node_guids = Property('AssociatedNodeGUIDs', islist=True)
    associated_port_guids = Property('AssociatedPortGUIDs', islist=True)
    associated_system_guids = Property('AssociatedSystemGUIDs', islist=True)

class LinkConfiguration(Record):
    auto_speed_negotiation_capable = Property('AutoSpeedNegotiationCapable', \
                                                                        False)
    auto_speed_negotiation_enabled = Property('AutoSpeedNegotiationEnabled', \
                                                                        False)
    capable_link_speed_gbps = Property('CapableLinkSpeedGbps', islist=True)
    configured_network_links = Property('ConfiguredNetworkLinks', \
                                    cls=ConfiguredNetworkLink, islist=True)

class SFP(Record):
    """The small form-factor pluggable transceiver in the port"""
    fiber_connection_type = Property('FiberConnectionType', '')
    manufacturer = Property('Manufacturer', '')
    medium_type = Property('MediumType', '')
    part_number = Property('PartNumber', '')
    serial_number = Property('SerialNumber', '')
    status = Property('Status', cls=Status)
    supported_sfp_types = Property('SupportedSFPTypes', islist=True)
    type = Property('Type', '')

class PortLinks(Record):
    associated_endpoints = Link('AssociatedEndpoints', islist=True)
    cables = Link('Cables', islist=True)
    connected_ports = Link('ConnectedPorts', islist=True)
    connected_switch_ports = Link('ConnectedSwitchPorts', islist=True)
    connected_switches = Link('ConnectedSwitches', islist=True)
    ethernet_interfaces = Link('EthernetInterfaces', islist=True)
    oem = Property('Oem', {})

class Port(Entity):
    readwrite_fields = (
        'Enabled',
        'InterfaceEnabled',
        'LinkState',
        'LinkTransitionIndicator',
        'LocationIndicatorActive',
    )

    actions = Property('Actions', {})
    active_width = Property('ActiveWidth', 0)
    capable_protocol_versions = Property('CapableProtocolVersions', islist=True)
    current_protocol_version = Property('CurrentProtocolVersion', '')
    current_speed_gbps = Property('CurrentSpeedGbps', 0.0)
    enabled = Property('Enabled', False)
    environment_metrics = Link('EnvironmentMetrics')
    ethernet = Property('Ethernet', cls=EthernetProperties)
    fibre_channel = Property('FibreChannel', cls=FibreChannelProperties)
    function_max_bandwidth = Property('FunctionMaxBandwidth', \
                                            cls=FunctionBandwidth, islist=True)
    function_min_bandwidth = Property('FunctionMinBandwidth', \
                                            cls=FunctionBandwidth, islist=True)
    genz = Property('GenZ', cls=GenZ)
    infiniband = Property('InfiniBand', cls=InfiniBandProperties)
    interface_enabled = Property('InterfaceEnabled', False)
    link_configuration = Property('LinkConfiguration', \
                                            cls=LinkConfiguration, islist=True)
    link_network_technology = Property('LinkNetworkTechnology', '')
    link_state = Property('LinkState', '')
    link_status = Property('LinkStatus', '')
    link_transition_indicator = Property('LinkTransitionIndicator', 0)
    links = Property('Links', cls=PortLinks)
    location = Property('Location', {})
    location_indicator_active = Property('LocationIndicatorActive', False)
    max_frame_size = Property('MaxFrameSize', 0)
    max_speed_gbps = Property('MaxSpeedGbps', 0.0)
    metrics = Link('Metrics')
    port_id = Property('PortId', '')
    port_medium = Property('PortMedium', '')
    port_protocol = Property('PortProtocol', '')
    port_type = Property('PortType', '')
    sfp = Property('SFP', cls=SFP)
    signal_detected = Property('SignalDetected', False)
    status = Property('Status', cls=Status)
    width = Property('Width', 0)

    def connected_ports(self):
        """Return the ports on the other end of this port's links"""
        return self.get_linked(Port, self.links.connected_ports)

def get_port(client, uri):
    """Get a Port instance from the service"""
    return Port.get(client, uri)

def list_referenced_ports(client, link):
    """Get every Port of the collection at ``link``"""
    return Port.list_referenced(client, link)
