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
"""Memory: a memory module or other memory device of a system"""

#---------Imports---------

from typedfish.common.entity import Entity, Link, Property, Record
from typedfish.common.types import Status
from typedfish.schemas.excerpts import ControlRangeExcerpt

#---------End of imports---------

class BaseModuleType(object):
    RDIMM = 'RDIMM'
    UDIMM = 'UDIMM'
    SO_DIMM = 'SO_DIMM'
    LRDIMM = 'LRDIMM'
    MINI_RDIMM = 'Mini_RDIMM'
    MINI_UDIMM = 'Mini_UDIMM'
    SO_RDIMM_72B = 'SO_RDIMM_72b'
    SO_UDIMM_72B = 'SO_UDIMM_72b'
    SO_DIMM_16B = 'SO_DIMM_16b'
    SO_DIMM_32B = 'SO_DIMM_32b'
    DIE = 'Die'

class ErrorCorrection(object):
    NO_ECC = 'NoECC'
    SINGLE_BIT_ECC = 'SingleBitECC'
    MULTI_BIT_ECC = 'MultiBitECC'
    ADDRESS_PARITY = 'AddressParity'

class MemoryClassification(object):
    VOLATILE = 'Volatile'
    BYTE_ACCESSIBLE_PERSISTENT = 'ByteAccessiblePersistent'
    BLOCK = 'Block'

class MemoryDeviceType(object):
    DDR = 'DDR'
    DDR2 = 'DDR2'
    DDR3 = 'DDR3'
    DDR4 = 'DDR4'
    DDR4_SDRAM = 'DDR4_SDRAM'
    DDR4E_SDRAM = 'DDR4E_SDRAM'
    LPDDR4_SDRAM = 'LPDDR4_SDRAM'
    DDR3_SDRAM = 'DDR3_SDRAM'
    LPDDR3_SDRAM = 'LPDDR3_SDRAM'
    DDR2_SDRAM = 'DDR2_SDRAM'
    DDR2_SDRAM_FB_DIMM = 'DDR2_SDRAM_FB_DIMM'
    DDR2_SDRAM_FB_DIMM_PROBE = 'DDR2_SDRAM_FB_DIMM_PROBE'
    DDR_SGRAM = 'DDR_SGRAM'
    DDR_SDRAM = 'DDR_SDRAM'
    ROM = 'ROM'
    SDRAM = 'SDRAM'
    EDO = 'EDO'
    FAST_PAGE_MODE = 'FastPageMode'
    PIPELINED_NIBBLE = 'PipelinedNibble'
    LOGICAL = 'Logical'
    HBM = 'HBM'
    HBM2 = 'HBM2'
    HBM3 = 'HBM3'
    GDDR = 'GDDR'
    GDDR2 = 'GDDR2'
    GDDR3 = 'GDDR3'
    GDDR4 = 'GDDR4'
    GDDR5 = 'GDDR5'
    GDDR5X = 'GDDR5X'
    GDDR6 = 'GDDR6'
    DDR5 = 'DDR5'
    OEM = 'OEM'

class MemoryMedia(object):
    DRAM = 'DRAM'
    NAND = 'NAND'
    INTEL_3D_XPOINT = 'Intel3DXPoint'
    PROPRIETARY = 'Proprietary'

class MemoryType(object):
    DRAM = 'DRAM'
    NVDIMM_N = 'NVDIMM_N'
    NVDIMM_F = 'NVDIMM_F'
    NVDIMM_P = 'NVDIMM_P'
    INTEL_OPTANE = 'IntelOptane'

class OperatingMemoryModes(object):
    VOLATILE = 'Volatile'
    PMEM = 'PMEM'
    BLOCK = 'Block'

class SecurityStates(object):
    ENABLED = 'Enabled'
    DISABLED = 'Disabled'
    UNLOCKED = 'Unlocked'
    LOCKED = 'Locked'
    FROZEN = 'Frozen'
    PASSPHRASELIMIT = 'Passphraselimit'

class MemoryLocation(Record):
    channel = Property('Channel', 0)
    memory_controller = Property('MemoryController', 0)
    slot = Property('Slot', 0)
    socket = Property('Socket', 0)

class PowerManagementPolicy(Record):
    average_power_budget_milli_watts = Property(\
                                        'AveragePowerBudgetMilliWatts', 0)
    max_tdp_milli_watts = Property('MaxTDPMilliWatts', 0)
    peak_power_budget_milli_watts = Property('PeakPowerBudgetMilliWatts', 0)
    policy_enabled = Property('PolicyEnabled', False)

class RegionSet(Record):
    """A memory region carved from the module"""
    memory_classification = Property('MemoryClassification', '')
    offset_mib = Property('OffsetMiB', 0)
    passphrase_enabled = Property('PassphraseEnabled', False)
    region_id = Property('RegionId', '')
    size_mib = Property('SizeMiB', 0)

class SecurityCapabilities(Record):
    configuration_lock_capable = Property('ConfigurationLockCapable', False)
    data_lock_capable = Property('DataLockCapable', False)
    max_passphrase_count = Property('MaxPassphraseCount', 0)
    passphrase_capable = Property('PassphraseCapable', False)
    passphrase_lock_limit = Property('PassphraseLockLimit', 0)
    security_states = Property('SecurityStates', islist=True)

class MemoryLinks(Record):
    batteries = Link('Batteries', islist=True)
    chassis = Link('Chassis')
    memory_media_sources = Link('MemoryMediaSources', islist=True)
    memory_region_media_sources = Link('MemoryRegionMediaSources', \
                                                                islist=True)
    processors = Link('Processors', islist=True)
    oem = Property('Oem', {})

class Memory(Entity):
    """A memory device.

    OperatingSpeedRangeMHz is a control object; setting its SettingMin or
    SettingMax sends the whole object.
    """
    readwrite_fields = (
        'Enabled',
        'LocationIndicatorActive',
        'OperatingSpeedRangeMHz',
        'SecurityState',
    )

    actions = Property('Actions', {})
    allocation_alignment_mib = Property('AllocationAlignmentMiB', 0)
    allocation_increment_mib = Property('AllocationIncrementMiB', 0)
    allowed_speeds_mhz = Property('AllowedSpeedsMHz', islist=True)
    assembly = Link('Assembly')
    base_module_type = Property('BaseModuleType', '')
    bus_width_bits = Property('BusWidthBits', 0)
    cache_size_mib = Property('CacheSizeMiB', 0)
    capacity_mib = Property('CapacityMiB', 0)
    certificates = Link('Certificates')
    configuration_locked = Property('ConfigurationLocked', False)
    data_width_bits = Property('DataWidthBits', 0)
    enabled = Property('Enabled', False)
    environment_metrics = Link('EnvironmentMetrics')
    error_correction = Property('ErrorCorrection', '')
    firmware_api_version = Property('FirmwareApiVersion', '')
    firmware_revision = Property('FirmwareRevision', '')
    is_rank_spare_enabled = Property('IsRankSpareEnabled', False)
    is_spare_device_enabled = Property('IsSpareDeviceEnabled', False)
    links = Property('Links', cls=MemoryLinks)
    location = Property('Location', {})
    location_indicator_active = Property('LocationIndicatorActive', False)
    log = Link('Log')
    logical_size_mib = Property('LogicalSizeMiB', 0)
    manufacturer = Property('Manufacturer', '')
    max_tdp_milli_watts = Property('MaxTDPMilliWatts', islist=True)
    memory_device_type = Property('MemoryDeviceType', '')
    memory_location = Property('MemoryLocation', cls=MemoryLocation)
    memory_media = Property('MemoryMedia', islist=True)
    memory_subsystem_controller_manufacturer_id = Property(\
                                'MemorySubsystemControllerManufacturerID', '')
    memory_subsystem_controller_product_id = Property(\
                                    'MemorySubsystemControllerProductID', '')
    memory_type = Property('MemoryType', '')
    metrics = Link('Metrics')
    model = Property('Model', '')
    module_manufacturer_id = Property('ModuleManufacturerID', '')
    module_product_id = Property('ModuleProductID', '')
    non_volatile_size_mib = Property('NonVolatileSizeMiB', 0)
    operating_memory_modes = Property('OperatingMemoryModes', islist=True)
    operating_speed_mhz = Property('OperatingSpeedMhz', 0)
    operating_speed_range_mhz = Property('OperatingSpeedRangeMHz', \
                                                    cls=ControlRangeExcerpt)
    part_number = Property('PartNumber', '')
    persistent_region_number_limit = Property('PersistentRegionNumberLimit', 0)
    persistent_region_size_limit_mib = Property(\
                                        'PersistentRegionSizeLimitMiB', 0)
    persistent_region_size_max_mib = Property('PersistentRegionSizeMaxMiB', 0)
    power_management_policy = Property('PowerManagementPolicy', \
                                                    cls=PowerManagementPolicy)
    regions = Property('Regions', cls=RegionSet, islist=True)
    security_capabilities = Property('SecurityCapabilities', \
                                                    cls=SecurityCapabilities)
    security_state = Property('SecurityState', '')
    serial_number = Property('SerialNumber', '')
    spare_part_number = Property('SparePartNumber', '')
    status = Property('Status', cls=Status)
    volatile_region_number_limit = Property('VolatileRegionNumberLimit', 0)
    volatile_region_size_limit_mib = Property('VolatileRegionSizeLimitMiB', 0)
    volatile_region_size_max_mib = Property('VolatileRegionSizeMaxMiB', 0)
    volatile_size_mib = Property('VolatileSizeMiB', 0)

    def processors(self):
        """Return the processors this memory is associated with"""
        from typedfish.schemas.processor import Processor
        return self.get_linked(Processor, self.links.processors)

def get_memory(client, uri):
    """Get a Memory instance from the service"""
    return Memory.get(client, uri)

def list_referenced_memorys(client, link):
    """Get every Memory of the collection at ``link``"""
    return Memory.list_referenced(client, link)
