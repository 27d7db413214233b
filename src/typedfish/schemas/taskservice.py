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
"""TaskService: the service that tracks long running tasks"""

#---------Imports---------

from typedfish.common.entity import Entity, Link, Property
from typedfish.common.types import Status

#---------End of imports---------

class OverWritePolicy(object):
    """What happens to completed tasks once the task list is full"""
    MANUAL = 'Manual'
    OLDEST = 'Oldest'

class TaskService(Entity):
    readwrite_fields = (
        'ServiceEnabled',
        'TaskAutoDeleteTimeoutMinutes',
    )

    actions = Property('Actions', {})
    completed_task_over_write_policy = Property(\
                                        'CompletedTaskOverWritePolicy', '')
    date_time = Property('DateTime', '')
    life_cycle_event_on_task_state_change = Property(\
                                    'LifeCycleEventOnTaskStateChange', False)
    service_enabled = Property('ServiceEnabled', False)
    status = Property('Status', cls=Status)
    task_auto_delete_timeout_minutes = Property(\
                                        'TaskAutoDeleteTimeoutMinutes', 0)
    tasks = Link('Tasks')

def get_task_service(client, uri):
    """Get a TaskService instance from the service"""
    return TaskService.get(client, uri)

def list_referenced_task_services(client, link):
    """Get every TaskService of the collection at ``link``"""
    return TaskService.list_referenced(client, link)
