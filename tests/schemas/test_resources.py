# -*- coding: utf-8 -*-
"""Tests for the Redfish resource types"""

import pytest

from typedfish import schemas
from typedfish.common.collection import CollectionError
from typedfish.schemas.drive import Drive, HotspareType, get_drive
from typedfish.schemas.environmentmetrics import EnvironmentMetrics
from typedfish.schemas.memory import Memory
from typedfish.schemas.processor import Processor, TurboState
from typedfish.schemas.resourceblock import PoolType, ResourceBlock
from typedfish.schemas.volume import Volume
from typedfish.schemas.zone import Zone, ZoneType, list_referenced_zones

ZONES = '/redfish/v1/Fabrics/F1/Zones'
DRIVE_URI = '/redfish/v1/Systems/1/Storage/1/Drives/0'
VOLUME_URI = '/redfish/v1/Systems/1/Storage/1/Volumes/1'


@pytest.mark.parametrize('cls', schemas.WRITABLE_TYPES, \
                                        ids=lambda cls: cls.__name__)
def test_whitelist_names_are_declared(cls):
    declared = cls.properties()

    assert cls.readwrite_fields
    assert len(set(cls.readwrite_fields)) == len(cls.readwrite_fields)
    for name in cls.readwrite_fields:
        assert name in declared


@pytest.mark.parametrize('cls', schemas.WRITABLE_TYPES, \
                                        ids=lambda cls: cls.__name__)
def test_fetched_resource_without_changes_is_not_patched(client, cls):
    uri = '/redfish/v1/Things/%s' % cls.__name__
    client.add(uri, {'@odata.id': uri, 'Id': cls.__name__})

    resource = cls.get(client, uri)

    assert resource.update() is False
    assert client.patches == []


def test_zone_collection_with_one_failing_member(client):
    uris = ['%s/%d' % (ZONES, idx) for idx in range(3)]
    client.add(ZONES, {'Members': [{'@odata.id': uri} for uri in uris]})
    for idx, uri in enumerate(uris):
        client.add(uri, {'@odata.id': uri, 'Id': str(idx), \
                                    'ZoneType': ZoneType.ZONE_OF_ENDPOINTS})
    client.add(uris[1], {'error': {}}, status=500)

    with pytest.raises(CollectionError) as excinfo:
        list_referenced_zones(client, ZONES)

    assert [zone.id for zone in excinfo.value.members] == ['0', '2']
    assert list(excinfo.value.failures) == [uris[1]]


def test_processor_turbo_state_is_read_only(client):
    uri = '/redfish/v1/Systems/1/Processors/CPU1'
    client.add(uri, {'@odata.id': uri, 'Id': 'CPU1', \
                                'TurboState': 'Enabled', 'TotalCores': 8})

    processor = Processor.get(client, uri)

    assert processor.turbo_state == TurboState.ENABLED
    assert processor.update() is False
    assert client.patches == []


def test_unknown_enum_value_survives(client, drive_doc):
    drive_doc['HotspareType'] = 'FutureSpareKind'
    client.add(DRIVE_URI, drive_doc)

    drive = get_drive(client, DRIVE_URI)

    assert drive.hotspare_type == 'FutureSpareKind'
    assert drive.update() is False

    drive.asset_tag = 'tag-1'
    drive.update()

    assert client.patch_bodies() == [{'AssetTag': 'tag-1'}]
    assert drive.to_dict()['HotspareType'] == 'FutureSpareKind'


def test_known_enum_value_is_sent_as_string(client, drive_doc):
    client.add(DRIVE_URI, drive_doc)
    drive = get_drive(client, DRIVE_URI)

    drive.hotspare_type = HotspareType.GLOBAL
    drive.update()

    assert client.patch_bodies() == [{'HotspareType': 'Global'}]


def test_drive_decodes_nested_members(client, drive_doc):
    client.add(DRIVE_URI, drive_doc)
    drive = get_drive(client, DRIVE_URI)

    assert drive.status.health == 'OK'
    assert drive.identifiers[0].durable_name_format == 'NAA'
    assert drive.links.volumes == [VOLUME_URI]
    assert drive.capacity_bytes == 899527000000


def test_drive_volumes_follows_links(client, drive_doc):
    client.add(DRIVE_URI, drive_doc)
    client.add(VOLUME_URI, {'@odata.id': VOLUME_URI, 'Id': '1', \
                            'RAIDType': 'RAID1', 'CapacityBytes': 1024, \
                            'Links': {'Drives': [{'@odata.id': DRIVE_URI}]}})

    volumes = get_drive(client, DRIVE_URI).volumes()

    assert len(volumes) == 1
    assert isinstance(volumes[0], Volume)
    assert volumes[0].raid_type == 'RAID1'
    assert [item.odata_id for item in volumes[0].drives()] == [DRIVE_URI]


def test_volume_list_member_change(client):
    client.add(VOLUME_URI, {'@odata.id': VOLUME_URI, \
                            'EncryptionTypes': ['NativeDriveEncryption'], \
                            'DisplayName': 'data'})
    volume = Volume.get(client, VOLUME_URI)

    volume.encryption_types.append('SoftwareAssisted')
    volume.display_name = 'data'
    volume.update()

    assert client.patch_bodies() == \
            [{'EncryptionTypes': ['NativeDriveEncryption', 'SoftwareAssisted']}]


def test_memory_control_change_sends_control_object(client):
    uri = '/redfish/v1/Systems/1/Memory/DIMM1'
    client.add(uri, {'@odata.id': uri, 'CapacityMiB': 32768, \
                'OperatingSpeedRangeMHz': {'AllowableMin': 2400, \
                    'AllowableMax': 3200, 'SettingMin': 2400, \
                    'SettingMax': 3200, 'ControlMode': 'Automatic'}})
    memory = Memory.get(client, uri)

    memory.operating_speed_range_mhz.setting_max = 2933
    memory.update()

    body = client.patch_bodies()[0]
    assert list(body) == ['OperatingSpeedRangeMHz']
    assert body['OperatingSpeedRangeMHz']['SettingMax'] == 2933
    assert body['OperatingSpeedRangeMHz']['SettingMin'] == 2400


def test_environment_power_limit(client):
    uri = '/redfish/v1/Chassis/1/EnvironmentMetrics'
    client.add(uri, {'@odata.id': uri, \
                    'PowerWatts': {'Reading': 312.5, 'PowerFactor': 0.9}, \
                    'FanSpeedsPercent': [{'Reading': 40, 'DeviceName': 'Fan1'}], \
                    'PowerLimitWatts': {'SetPoint': 500, 'ControlMode': 'Manual'}})
    metrics = EnvironmentMetrics.get(client, uri)

    assert metrics.power_watts.reading == 312.5
    assert metrics.fan_speeds_percent[0].device_name == 'Fan1'

    metrics.power_watts.reading = 0
    assert metrics.update() is False

    metrics.power_limit_watts.set_point = 450
    assert metrics.update() is True
    assert client.patch_bodies()[0]['PowerLimitWatts']['SetPoint'] == 450


def test_resource_block_pool_and_zones(client):
    uri = '/redfish/v1/CompositionService/ResourceBlocks/RB1'
    zone_uri = '/redfish/v1/CompositionService/ResourceZones/1'
    client.add(uri, {'@odata.id': uri, 'Pool': 'Free', \
                    'ResourceBlockType': ['Compute'], \
                    'Links': {'Zones': [{'@odata.id': zone_uri}]}})
    client.add(zone_uri, {'@odata.id': zone_uri, \
                    'ZoneType': 'ZoneOfResourceBlocks', \
                    'Links': {'ResourceBlocks': [{'@odata.id': uri}]}})
    block = ResourceBlock.get(client, uri)

    zones = block.zones()
    assert zones[0].zone_type == ZoneType.ZONE_OF_RESOURCE_BLOCKS
    assert zones[0].resource_blocks()[0].odata_id == uri

    block.pool = PoolType.ACTIVE
    block.client_name = 'tenant-a'
    block.update()

    assert client.patch_bodies() == [{'Client': 'tenant-a', 'Pool': 'Active'}]


def test_applied_operating_config_is_sent_as_link(client):
    uri = '/redfish/v1/Systems/1/Processors/CPU1'
    configs = '%s/OperatingConfigs' % uri
    client.add(uri, {'@odata.id': uri, \
                    'AppliedOperatingConfig': {'@odata.id': '%s/0' % configs}})
    processor = Processor.get(client, uri)

    processor.applied_operating_config = '%s/1' % configs
    processor.update()

    assert client.patch_bodies() == \
                [{'AppliedOperatingConfig': {'@odata.id': '%s/1' % configs}}]


def test_zone_hand_built_link_list_helpers(client):
    zone = Zone(client)
    assert zone.contains_zones() == []
    assert client.requests == []
