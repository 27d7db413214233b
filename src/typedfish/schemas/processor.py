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
"""Processor: a CPU, GPU, FPGA or other processing unit"""

#---------Imports---------

from typedfish.common.entity import Entity, Link, Property, Record
from typedfish.common.types import Status
from typedfish.schemas.excerpts import ControlRangeExcerpt

#---------End of imports---------

class BaseSpeedPriorityState(object):
    ENABLED = 'Enabled'
    DISABLED = 'Disabled'

class FpgaType(object):
    INTEGRATED = 'Integrated'
    DISCRETE = 'Discrete'

class InstructionSet(object):
    X86 = 'x86'
    X86_64 = 'x86-64'
    IA_64 = 'IA-64'
    ARM_A32 = 'ARM-A32'
    ARM_A64 = 'ARM-A64'
    MIPS32 = 'MIPS32'
    MIPS64 = 'MIPS64'
    POWER_ISA = 'PowerISA'
    OEM = 'OEM'

class ProcessorArchitecture(object):
    X86 = 'x86'
    IA_64 = 'IA-64'
    ARM = 'ARM'
    MIPS = 'MIPS'
    POWER = 'Power'
    OEM = 'OEM'

class ProcessorMemoryType(object):
    L1_CACHE = 'L1Cache'
    L2_CACHE = 'L2Cache'
    L3_CACHE = 'L3Cache'
    L4_CACHE = 'L4Cache'
    L5_CACHE = 'L5Cache'
    L6_CACHE = 'L6Cache'
    L7_CACHE = 'L7Cache'
    HBM1 = 'HBM1'
    HBM2 = 'HBM2'
    HBM3 = 'HBM3'
    SGRAM = 'SGRAM'
    GDDR = 'GDDR'
    GDDR2 = 'GDDR2'
    GDDR3 = 'GDDR3'
    GDDR4 = 'GDDR4'
    GDDR5 = 'GDDR5'
    GDDR5X = 'GDDR5X'
    GDDR6 = 'GDDR6'
    DDR = 'DDR'
    DDR2 = 'DDR2'
    DDR3 = 'DDR3'
    DDR4 = 'DDR4'
    DDR5 = 'DDR5'
    SDRAM = 'SDRAM'
    SRAM = 'SRAM'
    FLASH = 'Flash'
    OEM = 'OEM'

class ProcessorType(object):
    CPU = 'CPU'
    GPU = 'GPU'
    FPGA = 'FPGA'
    DSP = 'DSP'
    ACCELERATOR = 'Accelerator'
    CORE = 'Core'
    THREAD = 'Thread'
    OEM = 'OEM'

class SystemInterfaceType(object):
    QPI = 'QPI'
    UPI = 'UPI'
    PCIE = 'PCIe'
    ETHERNET = 'Ethernet'
    AMBA = 'AMBA'
    CCIX = 'CCIX'
    CXL = 'CXL'
    OEM = 'OEM'

class ThrottleCause(object):
    POWER_LIMIT = 'PowerLimit'
    THERMAL_LIMIT = 'ThermalLimit'
    CLOCK_LIMIT = 'ClockLimit'
    UNKNOWN = 'Unknown'
    OEM = 'OEM'

class TurboState(object):
    """Reported turbo mode; read-only on the processor resource"""
    ENABLED = 'Enabled'
    DISABLED = 'Disabled'

class EthernetInterface(Record):
    max_lanes = Property('MaxLanes', 0)
    max_speed_mbps = Property('MaxSpeedMbps', 0)

class ProcessorInterface(Record):
    ethernet = Property('Ethernet', cls=EthernetInterface)
    interface_type = Property('InterfaceType', '')
    pcie = Property('PCIe', {})

class FpgaReconfigurationSlot(Record):
    acceleration_function = Link('AccelerationFunction')
    programmable_from_host = Property('ProgrammableFromHost', False)
    slot_id = Property('SlotId', '')
    uuid = Property('UUID', '')

class FPGA(Record):
    external_interfaces = Property('ExternalInterfaces', \
                                        cls=ProcessorInterface, islist=True)
    firmware_id = Property('FirmwareId', '')
    firmware_manufacturer = Property('FirmwareManufacturer', '')
    firmware_version = Property('FirmwareVersion', '')
    fpga_type = Property('FpgaType', '')
    host_interface = Property('HostInterface', cls=ProcessorInterface)
    model = Property('Model', '')
    pcie_virtual_functions = Property('PCIeVirtualFunctions', 0)
    programmable_from_host = Property('ProgrammableFromHost', False)
    reconfiguration_slots = Property('ReconfigurationSlots', \
                                    cls=FpgaReconfigurationSlot, islist=True)

class MemorySummary(Record):
    ecc_mode_enabled = Property('ECCModeEnabled', False)
    metrics = Link('Metrics')
    total_cache_size_mib = Property('TotalCacheSizeMiB', 0)
    total_memory_size_mib = Property('TotalMemorySizeMiB', 0)

class ProcessorId(Record):
    effective_family = Property('EffectiveFamily', '')
    effective_model = Property('EffectiveModel', '')
    identification_registers = Property('IdentificationRegisters', '')
    microcode_info = Property('MicrocodeInfo', '')
    protected_identification_number = Property(\
                                        'ProtectedIdentificationNumber', '')
    step = Property('Step', '')
    vendor_id = Property('VendorId', '')

class ProcessorMemory(Record):
    capacity_mib = Property('CapacityMiB', 0)
    integrated_memory = Property('IntegratedMemory', False)
    memory_type = Property('MemoryType', '')
    speed_mhz = Property('SpeedMHz', 0)

class ProcessorLinks(Record):
    chassis = Link('Chassis')
    connected_processors = Link('ConnectedProcessors', islist=True)
    endpoints = Link('Endpoints', islist=True)
    graphics_controller = Link('GraphicsController')
    memory = Link('Memory', islist=True)
    network_device_functions = Link('NetworkDeviceFunctions', islist=True)
    pcie_device = Link('PCIeDevice')
    pcie_functions = Link('PCIeFunctions', islist=True)
    oem = Property('Oem', {})

class Processor(Entity):
    """A processor.

    AppliedOperatingConfig is a link; assign the URI of one of the
    OperatingConfigs members to switch configuration.
    """
    readwrite_fields = (
        'AppliedOperatingConfig',
        'Enabled',
        'LocationIndicatorActive',
        'OperatingSpeedRangeMHz',
        'SpeedLimitMHz',
        'SpeedLocked',
    )

    acceleration_functions = Link('AccelerationFunctions')
    actions = Property('Actions', {})
    additional_firmware_versions = Property('AdditionalFirmwareVersions', {})
    applied_operating_config = Link('AppliedOperatingConfig')
    assembly = Link('Assembly')
    base_speed_mhz = Property('BaseSpeedMHz', 0)
    base_speed_priority_state = Property('BaseSpeedPriorityState', '')
    certificates = Link('Certificates')
    enabled = Property('Enabled', False)
    environment_metrics = Link('EnvironmentMetrics')
    fpga = Property('FPGA', cls=FPGA)
    family = Property('Family', '')
    firmware_version = Property('FirmwareVersion', '')
    high_speed_core_ids = Property('HighSpeedCoreIDs', islist=True)
    instruction_set = Property('InstructionSet', '')
    links = Property('Links', cls=ProcessorLinks)
    location = Property('Location', {})
    location_indicator_active = Property('LocationIndicatorActive', False)
    manufacturer = Property('Manufacturer', '')
    max_speed_mhz = Property('MaxSpeedMHz', 0)
    max_tdp_watts = Property('MaxTDPWatts', 0)
    memory_summary = Property('MemorySummary', cls=MemorySummary)
    metrics = Link('Metrics')
    min_speed_mhz = Property('MinSpeedMHz', 0)
    model = Property('Model', '')
    operating_configs = Link('OperatingConfigs')
    operating_speed_mhz = Property('OperatingSpeedMHz', 0)
    operating_speed_range_mhz = Property('OperatingSpeedRangeMHz', \
                                                    cls=ControlRangeExcerpt)
    part_number = Property('PartNumber', '')
    ports = Link('Ports')
    processor_architecture = Property('ProcessorArchitecture', '')
    processor_id = Property('ProcessorId', cls=ProcessorId)
    processor_index = Property('ProcessorIndex', 0)
    processor_memory = Property('ProcessorMemory', cls=ProcessorMemory, \
                                                                islist=True)
    processor_type = Property('ProcessorType', '')
    replaceable = Property('Replaceable', False)
    serial_number = Property('SerialNumber', '')
    socket = Property('Socket', '')
    spare_part_number = Property('SparePartNumber', '')
    speed_limit_mhz = Property('SpeedLimitMHz', 0)
    speed_locked = Property('SpeedLocked', False)
    status = Property('Status', cls=Status)
    sub_processors = Link('SubProcessors')
    system_interface = Property('SystemInterface', cls=ProcessorInterface)
    tdp_watts = Property('TDPWatts', 0)
    throttle_causes = Property('ThrottleCauses', islist=True)
    throttled = Property('Throttled', False)
    total_cores = Property('TotalCores', 0)
    total_enabled_cores = Property('TotalEnabledCores', 0)
    total_threads = Property('TotalThreads', 0)
    turbo_state = Property('TurboState', '')
    uuid = Property('UUID', '')
    version = Property('Version', '')

    def list_sub_processors(self):
        """Return the cores or threads of this processor"""
        return Processor.list_referenced(self.client, self.sub_processors)

    def list_ports(self):
        """Return the ports of this processor"""
        from typedfish.schemas.port import Port
        return Port.list_referenced(self.client, self.ports)

    def memory(self):
        """Return the memory devices associated with this processor"""
        from typedfish.schemas.memory import Memory
        return self.get_linked(Memory, self.links.memory)

    def pcie_functions(self):
        """Return the PCIe functions associated with this processor"""
        from typedfish.schemas.pciefunction import PCIeFunction
        return self.get_linked(PCIeFunction, self.links.pcie_functions)

def get_processor(client, uri):
    """Get a Processor instance from the service

    :param client: client to issue the request with.
    :type client: RestClientBase object.
    :param uri: URI of the processor.
    :type uri: str.
    :returns: returns a Processor object

    """
    return Processor.get(client, uri)

def list_referenced_processors(client, link):
    """Get every Processor of the collection at ``link``"""
    return Processor.list_referenced(client, link)
