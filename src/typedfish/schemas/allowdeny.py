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
"""AllowDeny: a permit or deny rule for traffic on a network device"""

#---------Imports---------

from typedfish.common.entity import Entity, Property

#---------End of imports---------

class AllowType(object):
    ALLOW = 'Allow'
    DENY = 'Deny'

class DataDirection(object):
    INGRESS = 'Ingress'
    EGRESS = 'Egress'

class IPAddressType(object):
    IPV4 = 'IPv4'
    IPV6 = 'IPv6'

class AllowDeny(Entity):
    """A rule matched against packets by address, port and protocol"""
    readwrite_fields = (
        'AllowType',
        'DestinationPortLower',
        'DestinationPortUpper',
        'Direction',
        'IANAProtocolNumber',
        'IPAddressLower',
        'IPAddressType',
        'IPAddressUpper',
        'SourcePortLower',
        'SourcePortUpper',
        'StatefulSession',
    )

    actions = Property('Actions', {})
    allow_type = Property('AllowType', '')
    destination_port_lower = Property('DestinationPortLower', 0)
    destination_port_upper = Property('DestinationPortUpper', 0)
    direction = Property('Direction', '')
    iana_protocol_number = Property('IANAProtocolNumber', 0)
    ip_address_lower = Property('IPAddressLower', '')
    ip_address_type = Property('IPAddressType', '')
    ip_address_upper = Property('IPAddressUpper', '')
    source_port_lower = Property('SourcePortLower', 0)
    source_port_upper = Property('SourcePortUpper', 0)
    stateful_session = Property('StatefulSession', False)

def get_allow_deny(client, uri):
    """Get an AllowDeny instance from the service"""
    return AllowDeny.get(client, uri)

def list_referenced_allow_denys(client, link):
    """Get every AllowDeny of the collection at ``link``"""
    return AllowDeny.list_referenced(client, link)
