# -*- coding: utf-8 -*-
"""Shared fixtures: an in-memory client that serves canned documents"""

import json

import pytest

from typedfish.rest.v1 import StaticRestResponse


class FakeClient(object):
    """Serves documents from a dict and records every request.

    ``documents`` maps a path to a JSON value, raw bytes or an exception
    instance to raise. ``statuses`` overrides the status for a path.
    """
    def __init__(self, documents=None):
        self.documents = dict(documents or {})
        self.statuses = dict()
        self.requests = list()
        self.patch_status = 204
        self.patch_content = b''
        self.patch_error = None

    def add(self, path, document, status=200):
        self.documents[path] = document
        self.statuses[path] = status

    def get(self, path, args=None, headers=None):
        self.requests.append(('GET', path, None))
        document = self.documents.get(path)

        if isinstance(document, Exception):
            raise document
        elif document is None:
            return StaticRestResponse(Status=404, \
                                    Content={'error': {'code': 'NotFound'}})

        return StaticRestResponse(Status=self.statuses.get(path, 200), \
                                                            Content=document)

    def patch(self, path, args=None, body=None, headers=None):
        self.requests.append(('PATCH', path, body))

        if self.patch_error is not None:
            raise self.patch_error

        return StaticRestResponse(Status=self.patch_status, \
                                                    Content=self.patch_content)

    @property
    def patches(self):
        return [req for req in self.requests if req[0] == 'PATCH']

    def patch_bodies(self):
        """Return every PATCH body as it would appear on the wire"""
        return [json.loads(json.dumps(req[2])) for req in self.patches]


@pytest.fixture
def client():
    return FakeClient()


@pytest.fixture
def drive_doc():
    return {
        '@odata.id': '/redfish/v1/Systems/1/Storage/1/Drives/0',
        '@odata.type': '#Drive.v1_17_0.Drive',
        'Id': '0',
        'Name': 'Drive 0',
        'AssetTag': 'tag-0',
        'SerialNumber': 'SN123',
        'CapacityBytes': 899527000000,
        'MediaType': 'HDD',
        'Protocol': 'SAS',
        'HotspareType': 'None',
        'WriteCacheEnabled': False,
        'LocationIndicatorActive': False,
        'Status': {'State': 'Enabled', 'Health': 'OK'},
        'Identifiers': [
            {'DurableName': '500003942810D13A', 'DurableNameFormat': 'NAA'}
        ],
        'Links': {
            'Volumes': [
                {'@odata.id': '/redfish/v1/Systems/1/Storage/1/Volumes/1'}
            ]
        },
        'VendorSpecificField': {'ignored': True},
    }
