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
"""EnvironmentMetrics: temperature, humidity and power readings of a device"""

#---------Imports---------

from typedfish.common.entity import Entity, Property
from typedfish.schemas.excerpts import ControlSingleExcerpt, SensorExcerpt, \
            SensorEnergykWhExcerpt, SensorFanArrayExcerpt, SensorPowerExcerpt

#---------End of imports---------

class EnvironmentMetrics(Entity):
    """Environmental readings for a device.

    Only the PowerLimitWatts control can be written. A change to any of its
    members sends the whole control object.
    """
    readwrite_fields = ('PowerLimitWatts',)

    absolute_humidity = Property('AbsoluteHumidity', cls=SensorExcerpt)
    actions = Property('Actions', {})
    dew_point_celsius = Property('DewPointCelsius', cls=SensorExcerpt)
    energy_joules = Property('EnergyJoules', cls=SensorExcerpt)
    energy_kwh = Property('EnergykWh', cls=SensorEnergykWhExcerpt)
    fan_speeds_percent = Property('FanSpeedsPercent', \
                                    cls=SensorFanArrayExcerpt, islist=True)
    fan_speeds_percent_count = Property('FanSpeedsPercent@odata.count', 0)
    humidity_percent = Property('HumidityPercent', cls=SensorExcerpt)
    power_limit_watts = Property('PowerLimitWatts', cls=ControlSingleExcerpt)
    power_load_percent = Property('PowerLoadPercent', cls=SensorExcerpt)
    power_watts = Property('PowerWatts', cls=SensorPowerExcerpt)
    temperature_celsius = Property('TemperatureCelsius', cls=SensorExcerpt)

def get_environment_metrics(client, uri):
    """Get an EnvironmentMetrics instance from the service"""
    return EnvironmentMetrics.get(client, uri)

def list_referenced_environment_metrics(client, link):
    """Get every EnvironmentMetrics of the collection at ``link``"""
    return EnvironmentMetrics.list_referenced(client, link)
