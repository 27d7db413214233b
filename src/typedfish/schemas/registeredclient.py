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
"""RegisteredClient: a client that announced itself to the service"""

#---------Imports---------

from typedfish.common.entity import Entity, Property, Record

#---------End of imports---------

class ClientType(object):
    MONITOR = 'Monitor'
    CONFIGURE = 'Configure'

class ManagedResource(Record):
    """A resource the registered client manages or monitors"""
    includes_subordinates = Property('IncludesSubordinates', False)
    managed_resource_uri = Property('ManagedResourceURI', '')
    prefer_exclusive = Property('PreferExclusive', False)

class RegisteredClient(Entity):
    """A registered client.

    ExpirationDate is an ISO 8601 string and is sent back as received.
    """
    readwrite_fields = (
        'ClientType',
        'ClientURI',
        'ExpirationDate',
    )

    actions = Property('Actions', {})
    client_type = Property('ClientType', '')
    client_uri = Property('ClientURI', '')
    created_date = Property('CreatedDate', '')
    expiration_date = Property('ExpirationDate', '')
    managed_resources = Property('ManagedResources', cls=ManagedResource, \
                                                                islist=True)

def get_registered_client(client, uri):
    """Get a RegisteredClient instance from the service"""
    return RegisteredClient.get(client, uri)

def list_referenced_registered_clients(client, link):
    """Get every RegisteredClient of the collection at ``link``"""
    return RegisteredClient.list_referenced(client, link)
