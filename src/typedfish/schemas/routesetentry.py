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
"""RouteSetEntry: one hop choice inside a route set"""

#---------Imports---------

from typedfish.common.entity import Entity, Property

#---------End of imports---------

class RouteSetEntry(Entity):
    readwrite_fields = (
        'EgressIdentifier',
        'HopCount',
        'VCAction',
        'Valid',
    )

    actions = Property('Actions', {})
    egress_identifier = Property('EgressIdentifier', 0)
    hop_count = Property('HopCount', 0)
    vc_action = Property('VCAction', 0)
    valid = Property('Valid', False)

def get_route_set_entry(client, uri):
    """Get a RouteSetEntry instance from the service"""
    return RouteSetEntry.get(client, uri)

def list_referenced_route_set_entrys(client, link):
    """Get every RouteSetEntry of the collection at ``link``"""
    return RouteSetEntry.list_referenced(client, link)
