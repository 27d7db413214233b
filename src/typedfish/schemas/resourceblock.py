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
"""ResourceBlock: the unit of composition for composable infrastructure"""

#---------Imports---------

from typedfish.common.entity import Entity, Link, Property, Record
from typedfish.common.types import Status

#---------End of imports---------

class CompositionState(object):
    COMPOSING = 'Composing'
    COMPOSED_AND_AVAILABLE = 'ComposedAndAvailable'
    COMPOSED = 'Composed'
    UNUSED = 'Unused'
    FAILED = 'Failed'
    UNAVAILABLE = 'Unavailable'

class PoolType(object):
    """Which pool a resource block belongs to"""
    FREE = 'Free'
    ACTIVE = 'Active'
    UNASSIGNED = 'Unassigned'

class ResourceBlockType(object):
    COMPUTE = 'Compute'
    PROCESSOR = 'Processor'
    MEMORY = 'Memory'
    NETWORK = 'Network'
    STORAGE = 'Storage'
    COMPUTER_SYSTEM = 'ComputerSystem'
    EXPANSION = 'Expansion'
    INDEPENDENT_RESOURCE = 'IndependentResource'

class CompositionStatus(Record):
    composition_state = Property('CompositionState', '')
    max_compositions = Property('MaxCompositions', 0)
    number_of_compositions = Property('NumberOfCompositions', 0)
    reserved = Property('Reserved', False)
    sharing_capable = Property('SharingCapable', False)
    sharing_enabled = Property('SharingEnabled', False)

class ResourceBlockLimits(Record):
    """Composition limits a resource block imposes on its consumers"""
    max_compute = Property('MaxCompute', 0)
    max_computer_system = Property('MaxComputerSystem', 0)
    max_expansion = Property('MaxExpansion', 0)
    max_memory = Property('MaxMemory', 0)
    max_network = Property('MaxNetwork', 0)
    max_processor = Property('MaxProcessor', 0)
    max_storage = Property('MaxStorage', 0)
    min_compute = Property('MinCompute', 0)
    min_computer_system = Property('MinComputerSystem', 0)
    min_expansion = Property('MinExpansion', 0)
    min_memory = Property('MinMemory', 0)
    min_network = Property('MinNetwork', 0)
    min_processor = Property('MinProcessor', 0)
    min_storage = Property('MinStorage', 0)

class ResourceBlockLinks(Record):
    chassis = Link('Chassis', islist=True)
    computer_systems = Link('ComputerSystems', islist=True)
    consuming_resource_blocks = Link('ConsumingResourceBlocks', islist=True)
    supplying_resource_blocks = Link('SupplyingResourceBlocks', islist=True)
    zones = Link('Zones', islist=True)
    oem = Property('Oem', {})

class ResourceBlock(Entity):
    """A resource block.

    The component arrays (Drives, Memory, Processors and so on) hold URIs;
    the helper methods fetch the linked resources.
    """
    readwrite_fields = (
        'Client',
        'Pool',
    )

    actions = Property('Actions', {})
    client_name = Property('Client', '')
    composition_status = Property('CompositionStatus', cls=CompositionStatus)
    computer_systems = Link('ComputerSystems', islist=True)
    drives_links = Link('Drives', islist=True)
    ethernet_interfaces = Link('EthernetInterfaces', islist=True)
    links = Property('Links', cls=ResourceBlockLinks)
    memory_links = Link('Memory', islist=True)
    network_interfaces = Link('NetworkInterfaces', islist=True)
    pool = Property('Pool', '')
    processors_links = Link('Processors', islist=True)
    resource_block_type = Property('ResourceBlockType', islist=True)
    simple_storage = Link('SimpleStorage', islist=True)
    status = Property('Status', cls=Status)
    storage = Link('Storage', islist=True)

    def drives(self):
        """Return the drives in this resource block"""
        from typedfish.schemas.drive import Drive
        return self.get_linked(Drive, self.drives_links)

    def memory(self):
        """Return the memory devices in this resource block"""
        from typedfish.schemas.memory import Memory
        return self.get_linked(Memory, self.memory_links)

    def processors(self):
        """Return the processors in this resource block"""
        from typedfish.schemas.processor import Processor
        return self.get_linked(Processor, self.processors_links)

    def zones(self):
        """Return the zones this resource block belongs to"""
        from typedfish.schemas.zone import Zone
        return self.get_linked(Zone, self.links.zones)

    def consuming_resource_blocks(self):
        """Return the resource blocks built on top of this one"""
        return self.get_linked(ResourceBlock, \
                                        self.links.consuming_resource_blocks)

    def supplying_resource_blocks(self):
        """Return the resource blocks this one is built from"""
        return self.get_linked(ResourceBlock, \
                                        self.links.supplying_resource_blocks)

def get_resource_block(client, uri):
    """Get a ResourceBlock instance from the service"""
    return ResourceBlock.get(client, uri)

def list_referenced_resource_blocks(client, link):
    """Get every ResourceBlock of the collection at ``link``"""
    return ResourceBlock.list_referenced(client, link)
