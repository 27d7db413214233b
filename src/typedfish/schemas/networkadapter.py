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
"""NetworkAdapter: a physical network adapter capable of connecting to a
computer network"""

#---------Imports---------

from typedfish.common.entity import Entity, Link, Property, Record
from typedfish.common.types import Identifier, Status

#---------End of imports---------

class DataCenterBridging(Record):
    capable = Property('Capable', False)

class NicPartitioning(Record):
    npar_capable = Property('NparCapable', False)
    npar_enabled = Property('NparEnabled', False)

class NPIV(Record):
    max_device_logins = Property('MaxDeviceLogins', 0)
    max_port_logins = Property('MaxPortLogins', 0)

class SRIOV(Record):
    sriov_vepa_capable = Property('SRIOVVEPACapable', False)

class VirtualFunction(Record):
    device_max_count = Property('DeviceMaxCount', 0)
    min_assignment_group_size = Property('MinAssignmentGroupSize', 0)
    network_port_max_count = Property('NetworkPortMaxCount', 0)

class VirtualizationOffload(Record):
    sriov = Property('SRIOV', cls=SRIOV)
    virtual_function = Property('VirtualFunction', cls=VirtualFunction)

class ControllerCapabilities(Record):
    data_center_bridging = Property('DataCenterBridging', \
                                                    cls=DataCenterBridging)
    npar = Property('NPAR', cls=NicPartitioning)
    npiv = Property('NPIV', cls=NPIV)
    network_device_function_count = Property('NetworkDeviceFunctionCount', 0)
    network_port_count = Property('NetworkPortCount', 0)
    virtualization_offload = Property('VirtualizationOffload', \
                                                    cls=VirtualizationOffload)

class ControllerLinks(Record):
    network_device_functions = Link('NetworkDeviceFunctions', islist=True)
    pcie_devices = Link('PCIeDevices', islist=True)
    ports = Link('Ports', islist=True)
    oem = Property('Oem', {})

class Controllers(Record):
    """One controller of the adapter"""
    controller_capabilities = Property('ControllerCapabilities', \
                                                cls=ControllerCapabilities)
    firmware_package_version = Property('FirmwarePackageVersion', '')
    identifiers = Property('Identifiers', cls=Identifier, islist=True)
    links = Property('Links', cls=ControllerLinks)
    location = Property('Location', {})
    pcie_interface = Property('PCIeInterface', {})

class NetworkAdapter(Entity):
    readwrite_fields = ('LLDPEnabled',)

    actions = Property('Actions', {})
    assembly = Link('Assembly')
    certificates = Link('Certificates')
    controllers = Property('Controllers', cls=Controllers, islist=True)
    environment_metrics = Link('EnvironmentMetrics')
    identifiers = Property('Identifiers', cls=Identifier, islist=True)
    lldp_enabled = Property('LLDPEnabled', False)
    location = Property('Location', {})
    manufacturer = Property('Manufacturer', '')
    metrics = Link('Metrics')
    model = Property('Model', '')
    network_device_functions = Link('NetworkDeviceFunctions')
    network_ports = Link('NetworkPorts')
    part_number = Property('PartNumber', '')
    ports = Link('Ports')
    processors = Link('Processors')
    sku = Property('SKU', '')
    serial_number = Property('SerialNumber', '')
    status = Property('Status', cls=Status)

    def list_network_device_functions(self):
        """Return the network device functions of this adapter"""
        from typedfish.schemas.networkdevicefunction import \
                                                        NetworkDeviceFunction
        return NetworkDeviceFunction.list_referenced(self.client, \
                                                self.network_device_functions)

    def list_network_ports(self):
        """Return the network ports of this adapter"""
        from typedfish.schemas.networkport import NetworkPort
        return NetworkPort.list_referenced(self.client, self.network_ports)

    def list_ports(self):
        """Return the ports of this adapter"""
        from typedfish.schemas.port import Port
        return Port.list_referenced(self.client, self.ports)

def get_network_adapter(client, uri):
    """Get a NetworkAdapter instance from the service"""
    return NetworkAdapter.get(client, uri)

def list_referenced_network_adapters(client, link):
    """Get every NetworkAdapter of the collection at ``link``"""
    return NetworkAdapter.list_referenced(client, link)
