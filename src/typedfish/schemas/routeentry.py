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
"""RouteEntry: one entry of a fabric routing table"""

#---------Imports---------

from typedfish.common.entity import Entity, Link, Property

#---------End of imports---------

class RouteEntry(Entity):
    readwrite_fields = (
        'MinimumHopCount',
        'RawEntryHex',
    )

    actions = Property('Actions', {})
    minimum_hop_count = Property('MinimumHopCount', 0)
    raw_entry_hex = Property('RawEntryHex', '')
    route_set = Link('RouteSet')

    def route_set_entries(self):
        """Return the entries of this route's route set"""
        from typedfish.schemas.routesetentry import RouteSetEntry
        return RouteSetEntry.list_referenced(self.client, self.route_set)

def get_route_entry(client, uri):
    """Get a RouteEntry instance from the service"""
    return RouteEntry.get(client, uri)

def list_referenced_route_entrys(client, link):
    """Get every RouteEntry of the collection at ``link``"""
    return RouteEntry.list_referenced(client, link)
