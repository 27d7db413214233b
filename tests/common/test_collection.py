# -*- coding: utf-8 -*-
"""Tests for collection walking and partial failure reporting"""

import pytest

from typedfish.common.collection import CollectionError, get_collection, \
                                            get_members, list_referenced
from typedfish.rest.v1 import JsonDecodingError, RequestFailedError, \
                                                ServerDownOrUnreachableError
from typedfish.schemas.drive import Drive, list_referenced_drives

DRIVES = '/redfish/v1/Systems/1/Storage/1/Drives'


def members(*uris):
    return {'Members': [{'@odata.id': uri} for uri in uris],
            'Members@odata.count': len(uris)}


def drive(uri, serial):
    return {'@odata.id': uri, 'Id': uri.rsplit('/', 1)[-1],
            'SerialNumber': serial}


def test_empty_link_makes_no_request(client):
    assert Drive.list_referenced(client, '') == []
    assert list_referenced(Drive, client, None) == []
    assert client.requests == []


def test_members_are_fetched_in_document_order(client):
    uris = ['%s/%d' % (DRIVES, idx) for idx in (2, 0, 1)]
    client.add(DRIVES, members(*uris))
    for idx, uri in enumerate(uris):
        client.add(uri, drive(uri, 'SN%d' % idx))

    result = list_referenced_drives(client, DRIVES)

    assert [item.odata_id for item in result] == uris
    assert [req[1] for req in client.requests] == [DRIVES] + uris
    assert all(item.client is client for item in result)


def test_empty_collection(client):
    client.add(DRIVES, members())
    assert Drive.list_referenced(client, DRIVES) == []


def test_pages_are_followed(client):
    first = members('%s/0' % DRIVES)
    first['Members@odata.nextLink'] = '%s?$skip=1' % DRIVES
    client.add(DRIVES, first)
    client.add('%s?$skip=1' % DRIVES, members('%s/1' % DRIVES))

    assert get_collection(client, DRIVES) == ['%s/0' % DRIVES, \
                                                            '%s/1' % DRIVES]


def test_repeated_next_link_stops(client):
    page = members('%s/0' % DRIVES)
    page['Members@odata.nextLink'] = DRIVES
    client.add(DRIVES, page)

    assert get_collection(client, DRIVES) == ['%s/0' % DRIVES]
    assert len(client.requests) == 1


def test_partial_failure_keeps_successes(client):
    uris = ['%s/%d' % (DRIVES, idx) for idx in range(3)]
    client.add(DRIVES, members(*uris))
    client.add(uris[0], drive(uris[0], 'A'))
    client.add(uris[1], {'error': {}}, status=500)
    client.add(uris[2], drive(uris[2], 'C'))

    with pytest.raises(CollectionError) as excinfo:
        Drive.list_referenced(client, DRIVES)

    error = excinfo.value
    assert list(error.failures) == [uris[1]]
    assert isinstance(error.failures[uris[1]], RequestFailedError)
    assert error.failures[uris[1]].status == 500
    assert [item.serial_number for item in error.members] == ['A', 'C']
    assert uris[1] in str(error)


def test_every_failure_is_keyed_by_uri(client):
    uris = ['%s/%d' % (DRIVES, idx) for idx in range(3)]
    client.add(uris[0], ServerDownOrUnreachableError('timed out'))
    client.add(uris[2], b'{not json')

    with pytest.raises(CollectionError) as excinfo:
        get_members(Drive, client, uris)

    failures = excinfo.value.failures
    assert list(failures) == [uris[0], uris[1], uris[2]]
    assert isinstance(failures[uris[0]], ServerDownOrUnreachableError)
    assert isinstance(failures[uris[1]], RequestFailedError)
    assert isinstance(failures[uris[2]], JsonDecodingError)
    assert excinfo.value.members == []


def test_collection_failure_propagates_unchanged(client):
    client.add(DRIVES, {'error': {}}, status=404)

    with pytest.raises(RequestFailedError):
        Drive.list_referenced(client, DRIVES)


def test_collection_must_be_an_object(client):
    client.add(DRIVES, ['%s/0' % DRIVES])

    with pytest.raises(JsonDecodingError):
        get_collection(client, DRIVES)


def test_collection_error_without_failures_is_empty():
    assert CollectionError().empty()
