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
"""MemoryChunks: a slice of a memory domain presented to a system"""

#---------Imports---------

from typedfish.common.entity import Entity, Link, Property, Record
from typedfish.common.types import Status

#---------End of imports---------

class AddressRangeType(object):
    VOLATILE = 'Volatile'
    PMEM = 'PMEM'
    BLOCK = 'Block'

class InterleaveSet(Record):
    """One memory region interleaved into the chunk"""
    memory = Link('Memory')
    memory_level = Property('MemoryLevel', 0)
    offset_mib = Property('OffsetMiB', 0)
    region_id = Property('RegionId', '')
    size_mib = Property('SizeMiB', 0)

class MemoryChunksLinks(Record):
    endpoints = Link('Endpoints', islist=True)
    endpoints_count = Property('Endpoints@odata.count', 0)
    oem = Property('Oem', {})

class MemoryChunks(Entity):
    readwrite_fields = ('DisplayName',)

    actions = Property('Actions', {})
    address_range_offset_mib = Property('AddressRangeOffsetMiB', 0)
    address_range_type = Property('AddressRangeType', '')
    display_name = Property('DisplayName', '')
    interleave_sets = Property('InterleaveSets', cls=InterleaveSet, \
                                                                islist=True)
    is_mirror_enabled = Property('IsMirrorEnabled', False)
    is_spare = Property('IsSpare', False)
    links = Property('Links', cls=MemoryChunksLinks)
    memory_chunk_size_mib = Property('MemoryChunkSizeMiB', 0)
    status = Property('Status', cls=Status)

def get_memory_chunks(client, uri):
    """Get a MemoryChunks instance from the service"""
    return MemoryChunks.get(client, uri)

def list_referenced_memory_chunks(client, link):
    """Get every MemoryChunks of the collection at ``link``"""
    return MemoryChunks.list_referenced(client, link)
