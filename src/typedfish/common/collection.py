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
"""Fetching single resources and walking Redfish collections"""

#---------Imports---------

import logging
from collections import OrderedDict

import jsonpath_rw

from typedfish.rest.v1 import RequestFailedError, TransportError, \
                                                            JsonDecodingError

#---------End of imports---------

#---------Debug logger---------

LOGGER = logging.getLogger(__name__)

#---------End of debug logger---------

MEMBERS_EXPR = jsonpath_rw.parse(u"Members[*].'@odata.id'")
NEXTLINK = u'Members@odata.nextLink'

class CollectionError(Exception):
    """Raised when one or more members of a collection failed to load.

    ``failures`` maps each failed member URI to its exception, in member
    order. ``members`` holds every member that was fetched successfully.
    """
    def __init__(self, failures=None, members=None):
        self.failures = failures if failures is not None else OrderedDict()
        self.members = members if members is not None else list()
        super(CollectionError, self).__init__()

    def empty(self):
        """Return True when no member failed"""
        return not self.failures

    def __str__(self):
        lines = [u'failed to retrieve %d collection member(s):' % \
                                                            len(self.failures)]
        for uri, excp in self.failures.items():
            lines.append(u'  %s: %s' % (uri, excp))
        return u'\n'.join(lines)

def check_response(resp, path):
    """Raise when a response does not carry a success status

    :param resp: response to check.
    :type resp: RestResponse object.
    :param path: the path the request was sent to.
    :type path: str.
    :returns: returns the response unchanged

    """
    if resp.status < 200 or resp.status > 299:
        LOGGER.debug(u'%s returned %s', path, resp.status)
        raise RequestFailedError(resp, path=path)

    return resp

def fetch(client, uri):
    """GET a resource and return its response

    :param client: client to issue the request with.
    :type client: RestClientBase object.
    :param uri: URI of the resource.
    :type uri: str.
    :returns: returns a successful RestResponse

    """
    return check_response(client.get(uri), uri)

def get_collection(client, uri):
    """Return the member links of a collection, following every page

    :param client: client to issue the requests with.
    :type client: RestClientBase object.
    :param uri: URI of the collection.
    :type uri: str.
    :returns: returns a list of member URIs in document order

    """
    links = list()
    visited = set()

    while uri and uri not in visited:
        visited.add(uri)
        currdict = fetch(client, uri).dict

        if not isinstance(currdict, dict):
            raise JsonDecodingError(u'Collection %s is not a JSON object' % uri)

        links.extend(match.value for match in MEMBERS_EXPR.find(currdict))
        uri = currdict.get(NEXTLINK)

    return links

def get_members(cls, client, uris):
    """Fetch every URI as a ``cls`` resource, collecting failures

    :param cls: resource class used to decode the members.
    :type cls: Entity subclass.
    :param client: client to issue the requests with.
    :type client: RestClientBase object.
    :param uris: member URIs to fetch.
    :type uris: list.
    :returns: returns the list of decoded members

    """
    result = list()
    error = CollectionError(members=result)

    for uri in uris:
        try:
            result.append(cls.get(client, uri))
        except (TransportError, JsonDecodingError) as excp:
            LOGGER.warning(u'Unable to retrieve %s: %s', uri, excp)
            error.failures[uri] = excp

    if not error.empty():
        raise error

    return result

def list_referenced(cls, client, link):
    """Fetch all members of the collection at ``link``

    An empty link yields an empty list without touching the network.

    :param cls: resource class used to decode the members.
    :type cls: Entity subclass.
    :param client: client to issue the requests with.
    :type client: RestClientBase object.
    :param link: URI of the collection.
    :type link: str.
    :returns: returns the list of decoded members

    """
    if not link:
        return list()

    return get_members(cls, client, get_collection(client, link))
