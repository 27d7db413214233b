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
"""NetworkDeviceFunction: a logical interface exposed by a network adapter"""

#---------Imports---------

from typedfish.common.entity import Entity, Link, Property, Record
from typedfish.common.types import Status
from typedfish.schemas.vlannetworkinterface import VLAN

#---------End of imports---------

class AuthenticationMethod(object):
    NONE = 'None'
    CHAP = 'CHAP'
    MUTUAL_CHAP = 'MutualCHAP'

class BootMode(object):
    DISABLED = 'Disabled'
    PXE = 'PXE'
    ISCSI = 'iSCSI'
    FIBRE_CHANNEL = 'FibreChannel'
    FIBRE_CHANNEL_OVER_ETHERNET = 'FibreChannelOverEthernet'
    HTTP = 'HTTP'

class DataDirection(object):
    NONE = 'None'
    INGRESS = 'Ingress'
    EGRESS = 'Egress'

class IPAddressType(object):
    IPV4 = 'IPv4'
    IPV6 = 'IPv6'

class NetworkDeviceTechnology(object):
    DISABLED = 'Disabled'
    ETHERNET = 'Ethernet'
    FIBRE_CHANNEL = 'FibreChannel'
    ISCSI = 'iSCSI'
    FIBRE_CHANNEL_OVER_ETHERNET = 'FibreChannelOverEthernet'
    INFINIBAND = 'InfiniBand'

class WWNSource(object):
    CONFIGURED_LOCALLY = 'ConfiguredLocally'
    PROVIDED_BY_FABRIC = 'ProvidedByFabric'

class BootTargets(Record):
    boot_priority = Property('BootPriority', 0)
    lun_id = Property('LUNID', '')
    wwpn = Property('WWPN', '')

class Ethernet(Record):
    ethernet_interfaces = Link('EthernetInterfaces')
    mac_address = Property('MACAddress', '')
    mtu_size = Property('MTUSize', 0)
    mtu_size_maximum = Property('MTUSizeMaximum', 0)
    permanent_mac_address = Property('PermanentMACAddress', '')
    vlan = Property('VLAN', cls=VLAN)
    vlans = Link('VLANs')

class FibreChannel(Record):
    allow_fip_vlan_discovery = Property('AllowFIPVLANDiscovery', False)
    boot_targets = Property('BootTargets', cls=BootTargets, islist=True)
    fcoe_active_vlan_id = Property('FCoEActiveVLANId', 0)
    fcoe_local_vlan_id = Property('FCoELocalVLANId', 0)
    fibre_channel_id = Property('FibreChannelId', '')
    permanent_wwnn = Property('PermanentWWNN', '')
    permanent_wwpn = Property('PermanentWWPN', '')
    wwnn = Property('WWNN', '')
    wwn_source = Property('WWNSource', '')
    wwpn = Property('WWPN', '')

class HTTPBoot(Record):
    boot_media_uri = Property('BootMediaURI', '')

class InfiniBand(Record):
    mtu_size = Property('MTUSize', 0)
    node_guid = Property('NodeGUID', '')
    permanent_node_guid = Property('PermanentNodeGUID', '')
    permanent_port_guid = Property('PermanentPortGUID', '')
    permanent_system_guid = Property('PermanentSystemGUID', '')
    port_guid = Property('PortGUID', '')
    supported_mtu_sizes = Property('SupportedMTUSizes', islist=True)
    system_guid = Property('SystemGUID', '')

class Limit(Record):
    """A bandwidth or packet rate limit in one direction"""
    burst_bytes_per_second = Property('BurstBytesPerSecond', 0)
    burst_packets_per_second = Property('BurstPacketsPerSecond', 0)
    direction = Property('Direction', '')
    sustained_bytes_per_second = Property('SustainedBytesPerSecond', 0)
    sustained_packets_per_second = Property('SustainedPacketsPerSecond', 0)

class ISCSIBoot(Record):
    authentication_method = Property('AuthenticationMethod', '')
    chap_secret = Property('CHAPSecret', '')
    chap_username = Property('CHAPUsername', '')
    ip_address_type = Property('IPAddressType', '')
    ip_mask_dns_via_dhcp = Property('IPMaskDNSViaDHCP', False)
    initiator_default_gateway = Property('InitiatorDefaultGateway', '')
    initiator_ip_address = Property('InitiatorIPAddress', '')
    initiator_name = Property('InitiatorName', '')
    initiator_netmask = Property('InitiatorNetmask', '')
    mutual_chap_secret = Property('MutualCHAPSecret', '')
    mutual_chap_username = Property('MutualCHAPUsername', '')
    primary_dns = Property('PrimaryDNS', '')
    primary_lun = Property('PrimaryLUN', 0)
    primary_target_ip_address = Property('PrimaryTargetIPAddress', '')
    primary_target_name = Property('PrimaryTargetName', '')
    primary_target_tcp_port = Property('PrimaryTargetTCPPort', 0)
    primary_vlan_enable = Property('PrimaryVLANEnable', False)
    primary_vlan_id = Property('PrimaryVLANId', 0)
    router_advertisement_enabled = Property('RouterAdvertisementEnabled', \
                                                                        False)
    secondary_dns = Property('SecondaryDNS', '')
    secondary_lun = Property('SecondaryLUN', 0)
    secondary_target_ip_address = Property('SecondaryTargetIPAddress', '')
    secondary_target_name = Property('SecondaryTargetName', '')
    secondary_target_tcp_port = Property('SecondaryTargetTCPPort', 0)
    secondary_vlan_enable = Property('SecondaryVLANEnable', False)
    secondary_vlan_id = Property('SecondaryVLANId', 0)
    target_info_via_dhcp = Property('TargetInfoViaDHCP', False)

class NetworkDeviceFunctionLinks(Record):
    endpoints = Link('Endpoints', islist=True)
    ethernet_interfaces = Link('EthernetInterfaces', islist=True)
    offload_processors = Link('OffloadProcessors', islist=True)
    offload_system = Link('OffloadSystem')
    pcie_function = Link('PCIeFunction')
    physical_network_port_assignment = Link('PhysicalNetworkPortAssignment')
    physical_port_assignment = Link('PhysicalPortAssignment')
    oem = Property('Oem', {})

class NetworkDeviceFunction(Entity):
    readwrite_fields = (
        'BootMode',
        'DeviceEnabled',
        'NetDevFuncType',
        'SAVIEnabled',
    )

    actions = Property('Actions', {})
    allow_deny = Link('AllowDeny')
    assignable_physical_network_ports = Link(\
                                'AssignablePhysicalNetworkPorts', islist=True)
    assignable_physical_ports = Link('AssignablePhysicalPorts', islist=True)
    boot_mode = Property('BootMode', '')
    device_enabled = Property('DeviceEnabled', False)
    ethernet = Property('Ethernet', cls=Ethernet)
    fibre_channel = Property('FibreChannel', cls=FibreChannel)
    http_boot = Property('HTTPBoot', cls=HTTPBoot)
    infiniband = Property('InfiniBand', cls=InfiniBand)
    iscsi_boot = Property('iSCSIBoot', cls=ISCSIBoot)
    limits = Property('Limits', cls=Limit, islist=True)
    links = Property('Links', cls=NetworkDeviceFunctionLinks)
    max_virtual_functions = Property('MaxVirtualFunctions', 0)
    metrics = Link('Metrics')
    net_dev_func_capabilities = Property('NetDevFuncCapabilities', islist=True)
    net_dev_func_type = Property('NetDevFuncType', '')
    savi_enabled = Property('SAVIEnabled', False)
    status = Property('Status', cls=Status)
    virtual_functions_enabled = Property('VirtualFunctionsEnabled', False)

    def allow_deny_rules(self):
        """Return the traffic rules applied to this function"""
        from typedfish.schemas.allowdeny import AllowDeny
        return AllowDeny.list_referenced(self.client, self.allow_deny)

    def assignable_ports(self):
        """Return the physical ports this function can be assigned to"""
        from typedfish.schemas.port import Port
        return self.get_linked(Port, self.assignable_physical_ports)

def get_network_device_function(client, uri):
    """Get a NetworkDeviceFunction instance from the service"""
    return NetworkDeviceFunction.get(client, uri)

def list_referenced_network_device_functions(client, link):
    """Get every NetworkDeviceFunction of the collection at ``link``"""
    return NetworkDeviceFunction.list_referenced(client, link)
