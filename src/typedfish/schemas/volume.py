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
"""Volume: a logical storage area presented to hosts"""

#---------Imports---------

from typedfish.common.entity import Entity, Link, Property, Record
from typedfish.common.types import Identifier, Status

#---------End of imports---------

class EncryptionTypes(object):
    NATIVE_DRIVE_ENCRYPTION = 'NativeDriveEncryption'
    CONTROLLER_ASSISTED = 'ControllerAssisted'
    SOFTWARE_ASSISTED = 'SoftwareAssisted'

class InitializeMethod(object):
    SKIP = 'Skip'
    BACKGROUND = 'Background'
    FOREGROUND = 'Foreground'

class ProvisioningPolicy(object):
    FIXED = 'Fixed'
    THIN = 'Thin'

class RAIDType(object):
    RAID0 = 'RAID0'
    RAID1 = 'RAID1'
    RAID3 = 'RAID3'
    RAID4 = 'RAID4'
    RAID5 = 'RAID5'
    RAID6 = 'RAID6'
    RAID10 = 'RAID10'
    RAID01 = 'RAID01'
    RAID6TP = 'RAID6TP'
    RAID1E = 'RAID1E'
    RAID50 = 'RAID50'
    RAID60 = 'RAID60'
    RAID00 = 'RAID00'
    RAID10E = 'RAID10E'
    RAID1_TRIPLE = 'RAID1Triple'
    RAID10_TRIPLE = 'RAID10Triple'
    NONE = 'None'

class ReadCachePolicyType(object):
    READ_AHEAD = 'ReadAhead'
    ADAPTIVE_READ_AHEAD = 'AdaptiveReadAhead'
    OFF = 'Off'

class StorageAccessCapability(object):
    READ = 'Read'
    WRITE = 'Write'
    WRITE_ONCE = 'WriteOnce'
    APPEND = 'Append'
    STREAMING = 'Streaming'
    EXECUTE = 'Execute'

class VolumeUsageType(object):
    DATA = 'Data'
    SYSTEM_DATA = 'SystemData'
    CACHE_ONLY = 'CacheOnly'
    SYSTEM_RESERVE = 'SystemReserve'
    REPLICATION_RESERVE = 'ReplicationReserve'

class WriteCachePolicyType(object):
    WRITE_THROUGH = 'WriteThrough'
    PROTECTED_WRITE_BACK = 'ProtectedWriteBack'
    UNPROTECTED_WRITE_BACK = 'UnprotectedWriteBack'
    OFF = 'Off'

class WriteCacheStateType(object):
    UNPROTECTED = 'Unprotected'
    PROTECTED = 'Protected'
    DEGRADED = 'Degraded'

class WriteHoleProtectionPolicyType(object):
    OFF = 'Off'
    JOURNALING = 'Journaling'
    DISTRIBUTED_LOG = 'DistributedLog'
    OEM = 'Oem'

class Operation(Record):
    associated_features_registry = Link('AssociatedFeaturesRegistry')
    operation_name = Property('OperationName', '')
    percentage_complete = Property('PercentageComplete', 0)

class NamespaceFeatures(Record):
    supports_atomic_transaction_size = Property(\
                                        'SupportsAtomicTransactionSize', False)
    supports_deallocated_or_unwritten_lb_error = Property(\
                                'SupportsDeallocatedOrUnwrittenLBError', False)
    supports_io_performance_hints = Property('SupportsIOPerformanceHints', \
                                                                        False)
    supports_nguid_reuse = Property('SupportsNGUIDReuse', False)
    supports_thin_provisioning = Property('SupportsThinProvisioning', False)

class NVMeNamespaceProperties(Record):
    formatted_lba_size = Property('FormattedLBASize', '')
    is_shareable = Property('IsShareable', False)
    lba_formats_supported = Property('LBAFormatsSupported', islist=True)
    metadata_transferred_at_end_of_data_lba = Property(\
                                    'MetadataTransferredAtEndOfDataLBA', False)
    nvme_version = Property('NVMeVersion', '')
    namespace_features = Property('NamespaceFeatures', cls=NamespaceFeatures)
    namespace_id = Property('NamespaceId', '')
    number_lba_formats = Property('NumberLBAFormats', 0)

class VolumeLinks(Record):
    cache_data_volumes = Link('CacheDataVolumes', islist=True)
    cache_volume_source = Link('CacheVolumeSource')
    class_of_service = Link('ClassOfService')
    client_endpoints = Link('ClientEndpoints', islist=True)
    consistency_groups = Link('ConsistencyGroups', islist=True)
    dedicated_spare_drives = Link('DedicatedSpareDrives', islist=True)
    drives = Link('Drives', islist=True)
    journaling_media = Link('JournalingMedia')
    owning_storage_resource = Link('OwningStorageResource')
    owning_storage_service = Link('OwningStorageService')
    server_endpoints = Link('ServerEndpoints', islist=True)
    spare_resource_sets = Link('SpareResourceSets', islist=True)
    storage_groups = Link('StorageGroups', islist=True)
    oem = Property('Oem', {})

class Volume(Entity):
    """A volume, namespace or LUN provided by a storage subsystem.

    CapacitySources is kept in its JSON form; a change to any source sends
    the whole array.
    """
    readwrite_fields = (
        'AccessCapabilities',
        'CapacityBytes',
        'CapacitySources',
        'Compressed',
        'Deduplicated',
        'DisplayName',
        'Encrypted',
        'EncryptionTypes',
        'IOPerfModeEnabled',
        'IsBootCapable',
        'LowSpaceWarningThresholdPercents',
        'ProvisioningPolicy',
        'ReadCachePolicy',
        'RecoverableCapacitySourceCount',
        'StripSizeBytes',
        'WriteCachePolicy',
        'WriteHoleProtectionPolicy',
    )

    access_capabilities = Property('AccessCapabilities', islist=True)
    actions = Property('Actions', {})
    allocated_pools = Link('AllocatedPools')
    block_size_bytes = Property('BlockSizeBytes', 0)
    capacity = Property('Capacity', {})
    capacity_bytes = Property('CapacityBytes', 0)
    capacity_sources = Property('CapacitySources', islist=True)
    compressed = Property('Compressed', False)
    deduplicated = Property('Deduplicated', False)
    display_name = Property('DisplayName', '')
    encrypted = Property('Encrypted', False)
    encryption_types = Property('EncryptionTypes', islist=True)
    io_perf_mode_enabled = Property('IOPerfModeEnabled', False)
    io_statistics = Property('IOStatistics', {})
    identifiers = Property('Identifiers', cls=Identifier, islist=True)
    initialize_method = Property('InitializeMethod', '')
    is_boot_capable = Property('IsBootCapable', False)
    links = Property('Links', cls=VolumeLinks)
    logical_unit_number = Property('LogicalUnitNumber', 0)
    low_space_warning_threshold_percents = Property(\
                                'LowSpaceWarningThresholdPercents', islist=True)
    manufacturer = Property('Manufacturer', '')
    max_block_size_bytes = Property('MaxBlockSizeBytes', 0)
    media_span_count = Property('MediaSpanCount', 0)
    model = Property('Model', '')
    nvme_namespace_properties = Property('NVMeNamespaceProperties', \
                                                cls=NVMeNamespaceProperties)
    operations = Property('Operations', cls=Operation, islist=True)
    optimum_io_size_bytes = Property('OptimumIOSizeBytes', 0)
    provisioning_policy = Property('ProvisioningPolicy', '')
    raid_type = Property('RAIDType', '')
    read_cache_policy = Property('ReadCachePolicy', '')
    recoverable_capacity_source_count = Property(\
                                        'RecoverableCapacitySourceCount', 0)
    remaining_capacity_percent = Property('RemainingCapacityPercent', 0)
    replica_info = Property('ReplicaInfo', {})
    replica_targets = Link('ReplicaTargets', islist=True)
    status = Property('Status', cls=Status)
    storage_groups = Link('StorageGroups')
    strip_size_bytes = Property('StripSizeBytes', 0)
    volume_usage = Property('VolumeUsage', '')
    write_cache_policy = Property('WriteCachePolicy', '')
    write_cache_state = Property('WriteCacheState', '')
    write_hole_protection_policy = Property('WriteHoleProtectionPolicy', '')

    def drives(self):
        """Return the drives this volume is built from"""
        from typedfish.schemas.drive import Drive
        return self.get_linked(Drive, self.links.drives)

def get_volume(client, uri):
    """Get a Volume instance from the service"""
    return Volume.get(client, uri)

def list_referenced_volumes(client, link):
    """Get every Volume of the collection at ``link``"""
    return Volume.list_referenced(client, link)
