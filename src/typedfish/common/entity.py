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
"""Resource model: property descriptors, records and updatable entities"""

#---------Imports---------

import copy
import json
import logging
from collections import OrderedDict

import jsonpatch
import jsonpointer

from typedfish.rest.v1 import JsonDecodingError
from typedfish.common.sharedtypes import Dictable, JSONEncoder
from typedfish.common import collection

#---------End of imports---------

#---------Debug logger---------

LOGGER = logging.getLogger(__name__)

#---------End of debug logger---------

ODATA_ID = u'@odata.id'

class InternalUpdateError(Exception):
    """Raised when an update cannot rebuild the resource's original state"""
    pass

class SnapshotMissingError(InternalUpdateError):
    """Raised when a resource holds no snapshot to compare updates with"""
    pass

class SnapshotDecodeError(InternalUpdateError):
    """Raised when the stored snapshot no longer decodes"""
    pass

class Property(object):
    """Maps one member of a Redfish JSON document onto an attribute.

    :param name: the JSON member name.
    :type name: str
    :param default: zero value used when the member is absent.
    :param cls: Record subclass for nested objects.
    :type cls: type
    :param islist: the member is a JSON array.
    :type islist: bool

    """
    def __init__(self, name, default=None, cls=None, islist=False):
        self.name = name
        self.default = default
        self.cls = cls
        self.islist = islist
        self.attr = None

    def __set_name__(self, owner, attr):
        self.attr = attr

    def __get__(self, instance, owner):
        if instance is None:
            return self

        try:
            return instance.__dict__[self.attr]
        except KeyError:
            value = instance.__dict__[self.attr] = self.empty()
            return value

    def __set__(self, instance, value):
        instance.__dict__[self.attr] = value

    def empty(self):
        """Return a fresh zero value"""
        if self.islist:
            return list()
        elif self.cls is not None:
            return self.cls()

        return copy.deepcopy(self.default)

    def decode(self, value):
        """Convert a JSON value into the attribute value"""
        if value is None:
            return None
        elif self.islist and isinstance(value, list):
            return [self.decode_item(item) for item in value]

        return self.decode_item(value)

    def encode(self, value):
        """Convert the attribute value back into a JSON value"""
        if value is None:
            return None
        elif self.islist and isinstance(value, list):
            return [self.encode_item(item) for item in value]

        return self.encode_item(value)

    def decode_item(self, value):
        if self.cls is not None and isinstance(value, dict):
            return self.cls.from_dict(value)
        return copy.deepcopy(value)

    def encode_item(self, value):
        if isinstance(value, Dictable):
            return value.to_dict()
        return copy.deepcopy(value)

class Link(Property):
    """A reference to another resource, held as its URI.

    The wire form is ``{"@odata.id": uri}``; an array of references decodes
    to a list of URIs.
    """
    def __init__(self, name, islist=False):
        super(Link, self).__init__(name, default=u'', islist=islist)

    def decode_item(self, value):
        if isinstance(value, dict):
            return value.get(ODATA_ID, u'')
        return value

    def encode_item(self, value):
        if isinstance(value, str):
            return {ODATA_ID: value}
        return value

class Record(Dictable):
    """A JSON object with declared properties"""

    @classmethod
    def properties(cls):
        """Return the declared properties keyed by JSON member name

        :returns: returns an OrderedDict of Property objects

        """
        found = OrderedDict()
        for klass in reversed(cls.__mro__):
            for value in vars(klass).values():
                if isinstance(value, Property):
                    found[value.name] = value

        return found

    @classmethod
    def from_dict(cls, data):
        """Build a record from a decoded JSON object

        :param data: the JSON object.
        :type data: dict.

        """
        record = cls()
        record.load(data)
        return record

    def load(self, data):
        """Assign every declared property present in ``data``

        Members without a declared property are ignored.

        :param data: the JSON object.
        :type data: dict.

        """
        for name, prop in self.properties().items():
            if name in data:
                setattr(self, prop.attr, prop.decode(data[name]))

    def to_dict(self):
        """Encode every declared property back into JSON form"""
        result = OrderedDict()
        for name, prop in self.properties().items():
            result[name] = prop.encode(getattr(self, prop.attr))

        return result

class Entity(Record):
    """A Redfish resource addressed by its ``@odata.id``.

    Subclasses that accept client changes list the writable JSON members in
    ``readwrite_fields``; only those keep a snapshot of the payload they were
    decoded from, and only those members are ever sent by :meth:`update`.
    """
    readwrite_fields = ()

    odata_context = Property(u'@odata.context', u'')
    odata_etag = Property(u'@odata.etag', u'')
    odata_id = Property(ODATA_ID, u'')
    odata_type = Property(u'@odata.type', u'')
    id = Property(u'Id', u'')
    name = Property(u'Name', u'')
    description = Property(u'Description', u'')
    oem = Property(u'Oem', {})

    def __init__(self, client=None):
        self._client = client
        self._rawdata = None

    @property
    def client(self):
        """Return the client this resource was fetched with"""
        return self._client

    def set_client(self, client):
        """Set the client used for later requests

        :param client: client to use.
        :type client: RestClientBase object.

        """
        self._client = client

    @property
    def rawdata(self):
        """Return the snapshot bytes, or None for read-only resources"""
        return self._rawdata

    @classmethod
    def decode(cls, rawdata, client=None):
        """Decode a resource from the bytes of a JSON document

        :param rawdata: the JSON document.
        :type rawdata: bytes.
        :param client: client to associate with the resource.
        :type client: RestClientBase object.
        :returns: returns the decoded resource

        """
        if isinstance(rawdata, str):
            rawdata = rawdata.encode('utf-8')

        try:
            data = json.loads(rawdata.decode('utf-8'))
        except (ValueError, AttributeError) as excp:
            raise JsonDecodingError(u'Unable to decode %s: %s' % \
                                                        (cls.__name__, excp))

        if not isinstance(data, dict):
            raise JsonDecodingError(u'%s document is not a JSON object' % \
                                                                cls.__name__)

        resource = cls(client)
        resource.load(data)

        if cls.readwrite_fields:
            resource._rawdata = rawdata

        return resource

    @classmethod
    def get(cls, client, uri):
        """Fetch a single resource from the service

        :param client: client to issue the request with.
        :type client: RestClientBase object.
        :param uri: URI of the resource.
        :type uri: str.
        :returns: returns the decoded resource

        """
        resp = collection.fetch(client, uri)
        return cls.decode(resp.read, client)

    @classmethod
    def list_referenced(cls, client, link):
        """Fetch every member of the collection at ``link``

        :param client: client to issue the requests with.
        :type client: RestClientBase object.
        :param link: URI of the collection; empty means no collection.
        :type link: str.
        :returns: returns a list of decoded resources

        """
        return collection.list_referenced(cls, client, link)

    def get_linked(self, cls, uris):
        """Fetch a list of linked resources with this resource's client"""
        return collection.get_members(cls, self._client, uris)

    def writable_dict(self):
        """Return the encoded values of the whitelisted members"""
        props = self.properties()
        result = OrderedDict()

        for name in self.readwrite_fields:
            prop = props[name]
            result[name] = prop.encode(getattr(self, prop.attr))

        return result

    def changes(self):
        """Compute the body of the PATCH that update() would send

        :returns: returns an OrderedDict of changed member names to values

        """
        if not self._rawdata:
            raise SnapshotMissingError(u'%s %s has no snapshot to compare ' \
                u'with; fetch it from the service first' % \
                (self.__class__.__name__, self.odata_id))

        try:
            original = self.__class__.decode(self._rawdata)
        except JsonDecodingError as excp:
            raise SnapshotDecodeError(u'Snapshot of %s is corrupt: %s' % \
                                                        (self.odata_id, excp))

        currdict = original.writable_dict()
        newdict = self.writable_dict()
        patch = jsonpatch.make_patch(currdict, newdict)

        touched = set()
        for operation in patch:
            touched.add(jsonpointer.JsonPointer(operation[u'path']).parts[0])

            # move and copy name their source member in 'from' only
            if u'from' in operation:
                touched.add(jsonpointer.JsonPointer(\
                                            operation[u'from']).parts[0])

        body = OrderedDict()
        for name in self.readwrite_fields:
            if name in touched and currdict[name] != newdict[name]:
                body[name] = newdict[name]

        return body

    def update(self):
        """Send the whitelisted members changed since the last fetch

        :returns: returns True when a PATCH was sent, False when nothing
                  changed

        """
        body = self.changes()

        if not body:
            LOGGER.debug(u'No changes to commit for %s', self.odata_id)
            return False

        LOGGER.info(u'Changes made to path: %s', self.odata_id)
        LOGGER.debug(u'PATCH body: %s', json.dumps(body, cls=JSONEncoder))

        resp = self._client.patch(self.odata_id, body=body)
        collection.check_response(resp, self.odata_id)

        self._refresh_snapshot(resp, body)
        return True

    def _refresh_snapshot(self, resp, body):
        """Make the written state the baseline for the next update

        :param resp: response to the PATCH request.
        :type resp: RestResponse object.
        :param body: the body that was sent.
        :type body: dict.

        """
        try:
            respdict = json.loads(resp.read.decode('utf-8')) if resp.read \
                                                                    else None
        except (ValueError, AttributeError):
            respdict = None

        if isinstance(respdict, dict) and ODATA_ID in respdict:
            self._rawdata = resp.read
            return

        snapshot = json.loads(self._rawdata.decode('utf-8'), \
                                                object_pairs_hook=OrderedDict)
        snapshot.update(body)
        self._rawdata = json.dumps(snapshot).encode('utf-8')
