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
"""FabricAdapter: a physical adapter that connects a system to a fabric"""

#---------Imports---------

from typedfish.common.entity import Entity, Link, Property, Record
from typedfish.common.types import Status

#---------End of imports---------

class GenZ(Record):
    """Gen-Z specific tables of the adapter"""
    msdt = Link('MSDT')
    pidt = Property('PIDT', islist=True)
    ri_table = Property('RITable', islist=True)
    requestor_vcat = Link('RequestorVCAT')
    responder_vcat = Link('ResponderVCAT')
    ssdt = Link('SSDT')

class FabricAdapterLinks(Record):
    endpoints = Link('Endpoints', islist=True)
    endpoints_count = Property('Endpoints@odata.count', 0)
    memory_domains = Link('MemoryDomains', islist=True)
    memory_domains_count = Property('MemoryDomains@odata.count', 0)
    pcie_devices = Link('PCIeDevices', islist=True)
    pcie_devices_count = Property('PCIeDevices@odata.count', 0)
    oem = Property('Oem', {})

class FabricAdapter(Entity):
    readwrite_fields = (
        'FabricType',
        'LocationIndicatorActive',
    )

    actions = Property('Actions', {})
    asic_manufacturer = Property('ASICManufacturer', '')
    asic_part_number = Property('ASICPartNumber', '')
    asic_revision_identifier = Property('ASICRevisionIdentifier', '')
    fabric_type = Property('FabricType', '')
    fabric_type_capabilities = Property('FabricTypeCapabilities', islist=True)
    firmware_version = Property('FirmwareVersion', '')
    genz = Property('GenZ', cls=GenZ)
    links = Property('Links', cls=FabricAdapterLinks)
    location = Property('Location', {})
    location_indicator_active = Property('LocationIndicatorActive', False)
    manufacturer = Property('Manufacturer', '')
    model = Property('Model', '')
    pcie_interface = Property('PCIeInterface', {})
    part_number = Property('PartNumber', '')
    ports = Link('Ports')
    sku = Property('SKU', '')
    serial_number = Property('SerialNumber', '')
    spare_part_number = Property('SparePartNumber', '')
    status = Property('Status', cls=Status)
    uuid = Property('UUID', '')

    def list_ports(self):
        """Return the ports of this adapter"""
        from typedfish.schemas.port import Port
        return Port.list_referenced(self.client, self.ports)

def get_fabric_adapter(client, uri):
    """Get a FabricAdapter instance from the service"""
    return FabricAdapter.get(client, uri)

def list_referenced_fabric_adapters(client, link):
    """Get every FabricAdapter of the collection at ``link``"""
    return FabricAdapter.list_referenced(client, link)
