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
"""VLanNetworkInterface: a VLAN configured on a network interface"""

#---------Imports---------

from typedfish.common.entity import Entity, Property, Record

#---------End of imports---------

class VLAN(Record):
    """VLAN settings embedded in other network resources"""
    tagged = Property('Tagged', False)
    vlan_enable = Property('VLANEnable', False)
    vlan_id = Property('VLANId', 0)
    vlan_priority = Property('VLANPriority', 0)

class VLanNetworkInterface(Entity):
    readwrite_fields = (
        'VLANEnable',
        'VLANId',
        'VLANPriority',
    )

    actions = Property('Actions', {})
    vlan_enable = Property('VLANEnable', False)
    vlan_id = Property('VLANId', 0)
    vlan_priority = Property('VLANPriority', 0)

def get_vlan_network_interface(client, uri):
    """Get a VLanNetworkInterface instance from the service"""
    return VLanNetworkInterface.get(client, uri)

def list_referenced_vlan_network_interfaces(client, link):
    """Get every VLanNetworkInterface of the collection at ``link``"""
    return VLanNetworkInterface.list_referenced(client, link)
