# -*- coding: utf-8 -*-
"""
Redfish resource types
"""

from .allowdeny import AllowDeny, get_allow_deny, list_referenced_allow_denys
from .bootoption import BootOption, get_boot_option, \
                                                list_referenced_boot_options
from .drive import Drive, get_drive, list_referenced_drives
from .endpointgroup import EndpointGroup, get_endpoint_group, \
                                            list_referenced_endpoint_groups
from .environmentmetrics import EnvironmentMetrics, get_environment_metrics, \
                                        list_referenced_environment_metrics
from .fabricadapter import FabricAdapter, get_fabric_adapter, \
                                            list_referenced_fabric_adapters
from .key import Key, get_key, list_referenced_keys
from .memory import Memory, get_memory, list_referenced_memorys
from .memorychunks import MemoryChunks, get_memory_chunks, \
                                                list_referenced_memory_chunks
from .networkadapter import NetworkAdapter, get_network_adapter, \
                                            list_referenced_network_adapters
from .networkdevicefunction import NetworkDeviceFunction, \
                                get_network_device_function, \
                                list_referenced_network_device_functions
from .networkport import NetworkPort, get_network_port, \
                                                list_referenced_network_ports
from .pciefunction import PCIeFunction, get_pcie_function, \
                                                list_referenced_pcie_functions
from .port import Port, get_port, list_referenced_ports
from .processor import Processor, get_processor, list_referenced_processors
from .registeredclient import RegisteredClient, get_registered_client, \
                                        list_referenced_registered_clients
from .resourceblock import ResourceBlock, get_resource_block, \
                                            list_referenced_resource_blocks
from .routeentry import RouteEntry, get_route_entry, \
                                                list_referenced_route_entrys
from .routesetentry import RouteSetEntry, get_route_set_entry, \
                                            list_referenced_route_set_entrys
from .storagecontroller import StorageController, get_storage_controller, \
                                        list_referenced_storage_controllers
from .taskservice import TaskService, get_task_service, \
                                                list_referenced_task_services
from .vlannetworkinterface import VLanNetworkInterface, \
                                get_vlan_network_interface, \
                                list_referenced_vlan_network_interfaces
from .volume import Volume, get_volume, list_referenced_volumes
from .zone import Zone, get_zone, list_referenced_zones

WRITABLE_TYPES = (
    AllowDeny,
    BootOption,
    Drive,
    EndpointGroup,
    EnvironmentMetrics,
    FabricAdapter,
    Key,
    Memory,
    MemoryChunks,
    NetworkAdapter,
    NetworkDeviceFunction,
    NetworkPort,
    PCIeFunction,
    Port,
    Processor,
    RegisteredClient,
    ResourceBlock,
    RouteEntry,
    RouteSetEntry,
    StorageController,
    TaskService,
    VLanNetworkInterface,
    Volume,
    Zone,
)
