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
"""Zone: a set of fabric endpoints, zones or resource blocks"""

#---------Imports---------

from typedfish.common.entity import Entity, Link, Property, Record
from typedfish.common.types import Identifier, Status

#---------End of imports---------

class ExternalAccessibility(object):
    GLOBALLY_ACCESSIBLE = 'GloballyAccessible'
    NON_ZONED_ACCESSIBLE = 'NonZonedAccessible'
    ZONE_ONLY = 'ZoneOnly'
    NO_INTERNAL_ROUTING = 'NoInternalRouting'

class ZoneType(object):
    DEFAULT = 'Default'
    ZONE_OF_ENDPOINTS = 'ZoneOfEndpoints'
    ZONE_OF_ZONES = 'ZoneOfZones'
    ZONE_OF_RESOURCE_BLOCKS = 'ZoneOfResourceBlocks'

class ZoneLinks(Record):
    address_pools = Link('AddressPools', islist=True)
    address_pools_count = Property('AddressPools@odata.count', 0)
    contained_by_zones = Link('ContainedByZones', islist=True)
    contained_by_zones_count = Property('ContainedByZones@odata.count', 0)
    contains_zones = Link('ContainsZones', islist=True)
    contains_zones_count = Property('ContainsZones@odata.count', 0)
    endpoints = Link('Endpoints', islist=True)
    endpoints_count = Property('Endpoints@odata.count', 0)
    involved_switches = Link('InvolvedSwitches', islist=True)
    involved_switches_count = Property('InvolvedSwitches@odata.count', 0)
    resource_blocks = Link('ResourceBlocks', islist=True)
    resource_blocks_count = Property('ResourceBlocks@odata.count', 0)
    oem = Property('Oem', {})

class Zone(Entity):
    """A fabric zone.

    Related zones and resource blocks are held as URIs in ``links``; use
    :meth:`contains_zones`, :meth:`contained_by_zones` and
    :meth:`resource_blocks` to fetch them.
    """
    readwrite_fields = (
        'DefaultRoutingEnabled',
        'ExternalAccessibility',
        'ZoneType',
    )

    actions = Property('Actions', {})
    default_routing_enabled = Property('DefaultRoutingEnabled', False)
    external_accessibility = Property('ExternalAccessibility', '')
    identifiers = Property('Identifiers', cls=Identifier, islist=True)
    links = Property('Links', cls=ZoneLinks)
    status = Property('Status', cls=Status)
    zone_type = Property('ZoneType', '')

    def contains_zones(self):
        """Return the zones contained by this zone"""
        return self.get_linked(Zone, self.links.contains_zones)

    def contained_by_zones(self):
        """Return the zones that contain this zone"""
        return self.get_linked(Zone, self.links.contained_by_zones)

    def resource_blocks(self):
        """Return the resource blocks in this zone"""
        from typedfish.schemas.resourceblock import ResourceBlock
        return self.get_linked(ResourceBlock, self.links.resource_blocks)

def get_zone(client, uri):
    """Get a Zone instance from the service

    :param client: client to issue the request with.
    :type client: RestClientBase object.
    :param uri: URI of the zone.
    :type uri: str.
    :returns: returns a Zone object

    """
    return Zone.get(client, uri)

def list_referenced_zones(client, link):
    """Get every Zone of the collection at ``link``

    :param client: client to issue the requests with.
    :type client: RestClientBase object.
    :param link: URI of the zone collection, e.g. a fabric's Zones.
    :type link: str.
    :returns: returns a list of Zone objects

    """
    return Zone.list_referenced(client, link)
