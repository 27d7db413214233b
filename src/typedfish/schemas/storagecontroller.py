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
"""StorageController: a storage controller and its capabilities"""

#---------Imports---------

from typedfish.common.entity import Entity, Link, Property, Record
from typedfish.common.types import Identifier, Status

#---------End of imports---------

class ANAAccessState(object):
    """NVMe asymmetric namespace access state"""
    OPTIMIZED = 'Optimized'
    NON_OPTIMIZED = 'NonOptimized'
    INACCESSIBLE = 'Inaccessible'
    PERSISTENT_LOSS = 'PersistentLoss'

class NVMeControllerType(object):
    ADMIN = 'Admin'
    DISCOVERY = 'Discovery'
    IO = 'IO'

class ANACharacteristics(Record):
    access_state = Property('AccessState', '')
    volume = Link('Volume')

class CacheSummary(Record):
    persistent_cache_size_mib = Property('PersistentCacheSizeMiB', 0)
    status = Property('Status', cls=Status)
    total_cache_size_mib = Property('TotalCacheSizeMiB', 0)

class NVMeControllerAttributes(Record):
    reports_namespace_granularity = Property('ReportsNamespaceGranularity', \
                                                                        False)
    reports_uuid_list = Property('ReportsUUIDList', False)
    supports_128_bit_host_id = Property('Supports128BitHostId', False)
    supports_endurance_groups = Property('SupportsEnduranceGroups', False)
    supports_exceeding_power_of_non_operational_state = Property(\
                        'SupportsExceedingPowerOfNonOperationalState', False)
    supports_nvm_sets = Property('SupportsNVMSets', False)
    supports_predictable_latency_mode = Property(\
                                        'SupportsPredictableLatencyMode', False)
    supports_read_recovery_levels = Property('SupportsReadRecoveryLevels', \
                                                                        False)
    supports_reservations = Property('SupportsReservations', False)
    supports_sq_associations = Property('SupportsSQAssociations', False)
    supports_traffic_based_keep_alive = Property(\
                                        'SupportsTrafficBasedKeepAlive', False)

class NVMeSMARTCriticalWarnings(Record):
    media_in_read_only = Property('MediaInReadOnly', False)
    overall_subsystem_degraded = Property('OverallSubsystemDegraded', False)
    pmr_unreliable = Property('PMRUnreliable', False)
    power_backup_failed = Property('PowerBackupFailed', False)
    spare_capacity_worn_out = Property('SpareCapacityWornOut', False)

class NVMeControllerProperties(Record):
    ana_characteristics = Property('ANACharacteristics', \
                                        cls=ANACharacteristics, islist=True)
    allocated_completion_queues = Property('AllocatedCompletionQueues', 0)
    allocated_submission_queues = Property('AllocatedSubmissionQueues', 0)
    controller_type = Property('ControllerType', '')
    max_queue_size = Property('MaxQueueSize', 0)
    nvme_controller_attributes = Property('NVMeControllerAttributes', \
                                                cls=NVMeControllerAttributes)
    nvme_smart_critical_warnings = Property('NVMeSMARTCriticalWarnings', \
                                                cls=NVMeSMARTCriticalWarnings)
    nvme_version = Property('NVMeVersion', '')

class Rates(Record):
    consistency_check_rate_percent = Property('ConsistencyCheckRatePercent', 0)
    rebuild_rate_percent = Property('RebuildRatePercent', 0)
    transformation_rate_percent = Property('TransformationRatePercent', 0)

class StorageControllerLinks(Record):
    attached_volumes = Link('AttachedVolumes', islist=True)
    batteries = Link('Batteries', islist=True)
    endpoints = Link('Endpoints', islist=True)
    network_device_functions = Link('NetworkDeviceFunctions', islist=True)
    pcie_functions = Link('PCIeFunctions', islist=True)
    storage_services = Link('StorageServices', islist=True)
    oem = Property('Oem', {})

class StorageController(Entity):
    readwrite_fields = ('AssetTag',)

    actions = Property('Actions', {})
    assembly = Link('Assembly')
    asset_tag = Property('AssetTag', '')
    cache_summary = Property('CacheSummary', cls=CacheSummary)
    certificates = Link('Certificates')
    controller_rates = Property('ControllerRates', cls=Rates)
    environment_metrics = Link('EnvironmentMetrics')
    firmware_version = Property('FirmwareVersion', '')
    identifiers = Property('Identifiers', cls=Identifier, islist=True)
    links = Property('Links', cls=StorageControllerLinks)
    location = Property('Location', {})
    manufacturer = Property('Manufacturer', '')
    model = Property('Model', '')
    nvme_controller_properties = Property('NVMeControllerProperties', \
                                                cls=NVMeControllerProperties)
    pcie_interface = Property('PCIeInterface', {})
    part_number = Property('PartNumber', '')
    ports = Link('Ports')
    sku = Property('SKU', '')
    serial_number = Property('SerialNumber', '')
    speed_gbps = Property('SpeedGbps', 0.0)
    status = Property('Status', cls=Status)
    supported_controller_protocols = Property(\
                                'SupportedControllerProtocols', islist=True)
    supported_device_protocols = Property('SupportedDeviceProtocols', \
                                                                islist=True)
    supported_raid_types = Property('SupportedRAIDTypes', islist=True)

    def attached_volumes(self):
        """Return the volumes attached to this controller"""
        from typedfish.schemas.volume import Volume
        return self.get_linked(Volume, self.links.attached_volumes)

    def list_ports(self):
        """Return the ports of this controller"""
        from typedfish.schemas.port import Port
        return Port.list_referenced(self.client, self.ports)

def get_storage_controller(client, uri):
    """Get a StorageController instance from the service"""
    return StorageController.get(client, uri)

def list_referenced_storage_controllers(client, link):
    """Get every StorageController of the collection at ``link``"""
    return StorageController.list_referenced(client, link)
