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
"""PCIeFunction: one function of a PCIe device"""

#---------Imports---------

from typedfish.common.entity import Entity, Link, Property, Record
from typedfish.common.types import Status

#---------End of imports---------

class DeviceClass(object):
    UNCLASSIFIED_DEVICE = 'UnclassifiedDevice'
    MASS_STORAGE_CONTROLLER = 'MassStorageController'
    NETWORK_CONTROLLER = 'NetworkController'
    DISPLAY_CONTROLLER = 'DisplayController'
    MULTIMEDIA_CONTROLLER = 'MultimediaController'
    MEMORY_CONTROLLER = 'MemoryController'
    BRIDGE = 'Bridge'
    COMMUNICATION_CONTROLLER = 'CommunicationController'
    GENERIC_SYSTEM_PERIPHERAL = 'GenericSystemPeripheral'
    INPUT_DEVICE_CONTROLLER = 'InputDeviceController'
    DOCKING_STATION = 'DockingStation'
    PROCESSOR = 'Processor'
    SERIAL_BUS_CONTROLLER = 'SerialBusController'
    WIRELESS_CONTROLLER = 'WirelessController'
    INTELLIGENT_CONTROLLER = 'IntelligentController'
    SATELLITE_COMMUNICATIONS_CONTROLLER = 'SatelliteCommunicationsController'
    ENCRYPTION_CONTROLLER = 'EncryptionController'
    SIGNAL_PROCESSING_CONTROLLER = 'SignalProcessingController'
    PROCESSING_ACCELERATORS = 'ProcessingAccelerators'
    NON_ESSENTIAL_INSTRUMENTATION = 'NonEssentialInstrumentation'
    COPROCESSOR = 'Coprocessor'
    UNASSIGNED_CLASS = 'UnassignedClass'
    OTHER = 'Other'

class FunctionType(object):
    PHYSICAL = 'Physical'
    VIRTUAL = 'Virtual'

class PCIeFunctionLinks(Record):
    cxl_logical_device = Link('CXLLogicalDevice')
    drives = Link('Drives', islist=True)
    drives_count = Property('Drives@odata.count', 0)
    ethernet_interfaces = Link('EthernetInterfaces', islist=True)
    ethernet_interfaces_count = Property('EthernetInterfaces@odata.count', 0)
    network_device_functions = Link('NetworkDeviceFunctions', islist=True)
    network_device_functions_count = Property(\
                                    'NetworkDeviceFunctions@odata.count', 0)
    pcie_device = Link('PCIeDevice')
    processor = Link('Processor')
    storage_controllers = Link('StorageControllers', islist=True)
    storage_controllers_count = Property('StorageControllers@odata.count', 0)
    oem = Property('Oem', {})

class PCIeFunction(Entity):
    readwrite_fields = ('Enabled',)

    actions = Property('Actions', {})
    class_code = Property('ClassCode', '')
    device_class = Property('DeviceClass', '')
    device_id = Property('DeviceId', '')
    enabled = Property('Enabled', False)
    function_id = Property('FunctionId', 0)
    function_type = Property('FunctionType', '')
    links = Property('Links', cls=PCIeFunctionLinks)
    revision_id = Property('RevisionId', '')
    status = Property('Status', cls=Status)
    subsystem_id = Property('SubsystemId', '')
    subsystem_vendor_id = Property('SubsystemVendorId', '')
    vendor_id = Property('VendorId', '')

    def drives(self):
        """Return the drives reached through this function"""
        from typedfish.schemas.drive import Drive
        return self.get_linked(Drive, self.links.drives)

    def network_device_functions(self):
        """Return the network device functions of this function"""
        from typedfish.schemas.networkdevicefunction import \
                                                        NetworkDeviceFunction
        return self.get_linked(NetworkDeviceFunction, \
                                        self.links.network_device_functions)

    def storage_controllers(self):
        """Return the storage controllers of this function"""
        from typedfish.schemas.storagecontroller import StorageController
        return self.get_linked(StorageController, \
                                            self.links.storage_controllers)

def get_pcie_function(client, uri):
    """Get a PCIeFunction instance from the service"""
    return PCIeFunction.get(client, uri)

def list_referenced_pcie_functions(client, link):
    """Get every PCIeFunction of the collection at ``link``"""
    return PCIeFunction.list_referenced(client, link)
