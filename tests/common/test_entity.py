# -*- coding: utf-8 -*-
"""Tests for the resource model and the update core"""

import json

import pytest

from typedfish.common.entity import Entity, Link, Property, Record, \
                    InternalUpdateError, SnapshotMissingError, \
                    SnapshotDecodeError
from typedfish.rest.v1 import JsonDecodingError, RequestFailedError, \
                                                ServerDownOrUnreachableError
from typedfish.schemas.drive import Drive
from typedfish.schemas.volume import Volume

DRIVE_URI = '/redfish/v1/Systems/1/Storage/1/Drives/0'


class Nested(Record):
    value = Property('Value', 0)


class Widget(Entity):
    readwrite_fields = ('Label', 'Nested', 'Tags', 'Peer')

    label = Property('Label', '')
    serial = Property('Serial', '')
    nested = Property('Nested', cls=Nested)
    tags = Property('Tags', islist=True)
    peer = Link('Peer')


class Gauge(Entity):
    reading = Property('Reading', 0)


WIDGET = {
    '@odata.id': '/redfish/v1/Widgets/1',
    'Id': '1',
    'Label': 'first',
    'Serial': 'W1',
    'Nested': {'Value': 3},
    'Tags': ['a', 'b'],
    'Peer': {'@odata.id': '/redfish/v1/Widgets/2'},
}


@pytest.fixture
def widget(client):
    client.add('/redfish/v1/Widgets/1', WIDGET)
    return Widget.get(client, '/redfish/v1/Widgets/1')


def test_decode_assigns_declared_members(widget):
    assert widget.odata_id == '/redfish/v1/Widgets/1'
    assert widget.id == '1'
    assert widget.label == 'first'
    assert widget.nested.value == 3
    assert widget.tags == ['a', 'b']
    assert widget.peer == '/redfish/v1/Widgets/2'


def test_absent_members_take_zero_values():
    widget = Widget.decode(b'{"@odata.id": "/redfish/v1/Widgets/9"}')

    assert widget.label == ''
    assert widget.tags == []
    assert widget.peer == ''
    assert widget.nested.value == 0


def test_null_member_decodes_to_none():
    widget = Widget.decode(b'{"Label": null}')
    assert widget.label is None


def test_to_dict_restores_link_shape(widget):
    data = widget.to_dict()
    assert data['Peer'] == {'@odata.id': '/redfish/v1/Widgets/2'}
    assert data['Nested'] == {'Value': 3}


def test_decode_rejects_malformed_json():
    with pytest.raises(JsonDecodingError):
        Widget.decode(b'{"Label": ')


def test_decode_rejects_non_object_document():
    with pytest.raises(JsonDecodingError):
        Widget.decode(b'[1, 2, 3]')


def test_decode_accepts_text():
    widget = Widget.decode(u'{"Label": "text"}')
    assert widget.label == 'text'
    assert widget.rawdata == b'{"Label": "text"}'


def test_writable_type_keeps_snapshot(widget):
    assert json.loads(widget.rawdata.decode('utf-8')) == WIDGET


def test_read_only_type_keeps_no_snapshot(client):
    client.add('/redfish/v1/Gauges/1', {'Reading': 7})
    gauge = Gauge.get(client, '/redfish/v1/Gauges/1')

    assert gauge.reading == 7
    assert gauge.rawdata is None


def test_get_associates_client(client, widget):
    assert widget.client is client


def test_get_raises_on_error_status(client):
    client.add('/redfish/v1/Widgets/3', {'error': {}}, status=503)

    with pytest.raises(RequestFailedError) as excinfo:
        Widget.get(client, '/redfish/v1/Widgets/3')

    assert excinfo.value.status == 503
    assert excinfo.value.path == '/redfish/v1/Widgets/3'


def test_unchanged_resource_is_not_patched(client, widget):
    assert widget.update() is False
    assert client.patches == []


def test_only_changed_members_are_sent(client, widget):
    widget.label = 'second'

    assert widget.update() is True
    assert client.patches[0][1] == '/redfish/v1/Widgets/1'
    assert client.patch_bodies() == [{'Label': 'second'}]


def test_members_outside_whitelist_are_never_sent(client, widget):
    widget.serial = 'HACKED'
    widget.name = 'renamed'

    assert widget.update() is False
    assert client.patches == []


def test_nested_change_sends_whole_member(client, widget):
    widget.nested.value = 4
    widget.update()

    assert client.patch_bodies() == [{'Nested': {'Value': 4}}]


def test_list_change_sends_whole_list(client, widget):
    widget.tags.append('c')
    widget.update()

    assert client.patch_bodies() == [{'Tags': ['a', 'b', 'c']}]


def test_link_change_sends_link_object(client, widget):
    widget.peer = '/redfish/v1/Widgets/5'
    widget.update()

    assert client.patch_bodies() == \
                        [{'Peer': {'@odata.id': '/redfish/v1/Widgets/5'}}]


def test_changes_reports_pending_body(widget):
    widget.label = 'pending'
    assert dict(widget.changes()) == {'Label': 'pending'}


class Shelf(Entity):
    readwrite_fields = ('Title', 'Slot', 'Front', 'Back', 'Primary', 'Spare')

    title = Property('Title', '')
    slot = Property('Slot', 0)
    front = Property('Front', islist=True)
    back = Property('Back', islist=True)
    primary = Property('Primary', {})
    spare = Property('Spare', {})


SHELF = {
    '@odata.id': '/redfish/v1/Shelves/1',
    'Title': 'top',
    'Slot': 1,
    'Front': ['Read', 'Write'],
    'Back': [],
    'Primary': {'x': {'k': 1}},
    'Spare': {},
}


@pytest.fixture
def shelf(client):
    client.add('/redfish/v1/Shelves/1', SHELF)
    return Shelf.get(client, '/redfish/v1/Shelves/1')


def test_two_scalar_changes_are_both_sent(client, shelf):
    shelf.title = 'bottom'
    shelf.slot = 2

    assert shelf.update() is True
    assert client.patch_bodies() == [{'Title': 'bottom', 'Slot': 2}]


def test_scalar_and_list_changes_are_both_sent(client, shelf):
    shelf.slot = 5
    shelf.front.append('Append')

    shelf.update()

    assert client.patch_bodies() == \
                    [{'Slot': 5, 'Front': ['Read', 'Write', 'Append']}]


def test_value_moved_between_lists_sends_both(client, shelf):
    shelf.front = ['Read']
    shelf.back = ['Write']

    shelf.update()

    assert client.patch_bodies() == [{'Front': ['Read'], 'Back': ['Write']}]


def test_whole_list_moved_to_other_list_sends_both(client, shelf):
    shelf.front = []
    shelf.back = ['Read', 'Write']

    shelf.update()

    assert client.patch_bodies() == \
                                [{'Front': [], 'Back': ['Read', 'Write']}]


def test_values_swapped_between_lists_sends_both(client):
    client.add('/redfish/v1/Shelves/2', dict(SHELF, \
                    **{'@odata.id': '/redfish/v1/Shelves/2', 'Back': ['Append']}))
    shelf = Shelf.get(client, '/redfish/v1/Shelves/2')

    shelf.front, shelf.back = shelf.back, shelf.front
    shelf.update()

    assert client.patch_bodies() == \
                        [{'Front': ['Append'], 'Back': ['Read', 'Write']}]


def test_value_moved_between_objects_sends_both(client, shelf):
    shelf.primary = {}
    shelf.spare = {'x': {'k': 1}}

    assert set(shelf.changes()) == set(['Primary', 'Spare'])
    shelf.update()

    assert client.patch_bodies() == [{'Primary': {}, 'Spare': {'x': {'k': 1}}}]


def test_moved_value_is_in_refreshed_snapshot(client, shelf):
    shelf.front = ['Read']
    shelf.back = ['Write']

    assert shelf.update() is True
    assert shelf.update() is False
    assert len(client.patches) == 1


def test_volume_capability_moved_to_encryption_types(client):
    client.add('/redfish/v1/Volumes/1', {
        '@odata.id': '/redfish/v1/Volumes/1',
        'AccessCapabilities': ['Read', 'Write'],
        'EncryptionTypes': [],
    })
    volume = Volume.get(client, '/redfish/v1/Volumes/1')

    volume.access_capabilities = ['Read']
    volume.encryption_types = ['Write']

    assert dict(volume.changes()) == \
            {'AccessCapabilities': ['Read'], 'EncryptionTypes': ['Write']}


def test_hand_built_resource_has_no_snapshot(client):
    widget = Widget(client)
    widget.label = 'new'

    with pytest.raises(SnapshotMissingError):
        widget.update()

    assert client.requests == []


def test_corrupt_snapshot_is_reported(client, widget):
    widget._rawdata = b'garbage'

    with pytest.raises(SnapshotDecodeError) as excinfo:
        widget.update()

    assert isinstance(excinfo.value, InternalUpdateError)
    assert client.patches == []


def test_patch_failure_status_propagates(client, widget):
    client.patch_status = 400
    widget.label = 'rejected'

    with pytest.raises(RequestFailedError) as excinfo:
        widget.update()

    assert excinfo.value.status == 400


def test_network_failure_propagates(client, widget):
    client.patch_error = ServerDownOrUnreachableError('down')
    widget.label = 'lost'

    with pytest.raises(ServerDownOrUnreachableError):
        widget.update()

    assert len(client.patches) == 1


def test_second_update_after_success_is_noop(client, widget):
    widget.label = 'second'
    assert widget.update() is True
    assert widget.update() is False
    assert len(client.patches) == 1


def test_snapshot_taken_from_full_response(client, widget):
    returned = dict(WIDGET, Label='server-side')
    client.patch_status = 200
    client.patch_content = json.dumps(returned).encode('utf-8')

    widget.label = 'second'
    widget.update()

    assert json.loads(widget.rawdata.decode('utf-8'))['Label'] == \
                                                                'server-side'
    assert widget.label == 'second'


def test_failed_update_keeps_snapshot(client, widget):
    client.patch_status = 500
    widget.label = 'retry'

    with pytest.raises(RequestFailedError):
        widget.update()

    client.patch_status = 204
    assert widget.update() is True
    assert client.patch_bodies()[-1] == {'Label': 'retry'}


def test_drive_scenario(client, drive_doc):
    client.add(DRIVE_URI, drive_doc)
    drive = Drive.get(client, DRIVE_URI)

    drive.write_cache_enabled = True
    drive.serial_number = 'HACKED'

    assert drive.update() is True
    assert client.patch_bodies() == [{'WriteCacheEnabled': True}]


def test_records_compare_by_value():
    first = Nested.from_dict({'Value': 1})
    second = Nested.from_dict({'Value': 1})

    assert first == second
    assert first != Nested.from_dict({'Value': 2})
    assert json.loads(first.to_json()) == {'Value': 1}
