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
""" Shared types used in this module """

#---------Imports---------

import json
import jsonpatch
from typedfish.rest.v1 import JSONEncoder

#---------End of imports---------

class JSONEncoder(JSONEncoder):
    """JSONEncoder that serializes records and JSON patches"""
    def default(self, obj):
        """Set defaults

        :param obj: object to be encoded into JSON.
        :type obj: Dictable or jsonpatch.JsonPatch object.

        """
        if isinstance(obj, Dictable):
            return obj.to_dict()
        elif isinstance(obj, jsonpatch.JsonPatch):
            return obj.patch
        return super(JSONEncoder, self).default(obj)

class Dictable(object):
    """A base class for values that serialize to a JSON object"""
    def to_dict(self):
        """Overridable function"""
        raise NotImplementedError("You must override this method in your " \
                                                            "derived class")

    def to_json(self, indent=None):
        """Serialize to a JSON string

        :param indent: indentation passed to json.dumps.
        :type indent: int.
        :returns: returns the JSON text

        """
        return json.dumps(self, cls=JSONEncoder, indent=indent)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__, self.to_json())
