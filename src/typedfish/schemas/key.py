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
"""Key: an SSH public key or NVMe-oF pre-shared key"""

#---------Imports---------

from typedfish.common.entity import Entity, Property, Record

#---------End of imports---------

class KeyType(object):
    NVMEOF = 'NVMeoF'
    SSH = 'SSH'

class NVMeoFSecureHashType(object):
    SHA256 = 'SHA256'
    SHA384 = 'SHA384'
    SHA512 = 'SHA512'

class NVMeoFSecurityProtocolType(object):
    DHHC = 'DHHC'
    TLS_PSK = 'TLS_PSK'
    OEM = 'OEM'

class NVMeoF(Record):
    host_key_id = Property('HostKeyId', '')
    nqn = Property('NQN', '')
    oem_security_protocol_type = Property('OEMSecurityProtocolType', '')
    secure_hash_allow_list = Property('SecureHashAllowList', islist=True)
    security_protocol_type = Property('SecurityProtocolType', '')

class Key(Entity):
    """A key; the key material itself is write-once and never patched"""
    readwrite_fields = ('UserDescription',)

    actions = Property('Actions', {})
    key_string = Property('KeyString', '')
    key_type = Property('KeyType', '')
    nvmeof = Property('NVMeoF', cls=NVMeoF)
    user_description = Property('UserDescription', '')

def get_key(client, uri):
    """Get a Key instance from the service"""
    return Key.get(client, uri)

def list_referenced_keys(client, link):
    """Get every Key of the collection at ``link``"""
    return Key.list_referenced(client, link)
