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
"""EndpointGroup: a set of endpoints managed as one"""

#---------Imports---------

from typedfish.common.entity import Entity, Link, Property, Record
from typedfish.common.types import Identifier

#---------End of imports---------

class GroupType(object):
    CLIENT = 'Client'
    SERVER = 'Server'
    INITIATOR = 'Initiator'
    TARGET = 'Target'

class EndpointGroupLinks(Record):
    connections = Link('Connections', islist=True)
    connections_count = Property('Connections@odata.count', 0)
    endpoints = Link('Endpoints', islist=True)
    endpoints_count = Property('Endpoints@odata.count', 0)
    oem = Property('Oem', {})

class EndpointGroup(Entity):
    readwrite_fields = (
        'GroupType',
        'TargetEndpointGroupIdentifier',
    )

    actions = Property('Actions', {})
    endpoints_count = Property('Endpoints@odata.count', 0)
    group_type = Property('GroupType', '')
    identifier = Property('Identifier', cls=Identifier)
    links = Property('Links', cls=EndpointGroupLinks)
    target_endpoint_group_identifier = Property(\
                                        'TargetEndpointGroupIdentifier', 0)

def get_endpoint_group(client, uri):
    """Get an EndpointGroup instance from the service"""
    return EndpointGroup.get(client, uri)

def list_referenced_endpoint_groups(client, link):
    """Get every EndpointGroup of the collection at ``link``"""
    return EndpointGroup.list_referenced(client, link)
