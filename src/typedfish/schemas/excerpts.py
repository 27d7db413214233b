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
"""Control and sensor excerpts embedded in other resources"""

#---------Imports---------

from typedfish.common.entity import Property, Record

#---------End of imports---------

class ControlMode(object):
    """Control.ControlMode"""
    AUTOMATIC = 'Automatic'
    OVERRIDE = 'Override'
    MANUAL = 'Manual'
    DISABLED = 'Disabled'

class ControlRangeExcerpt(Record):
    """A control whose setting is a range, such as a speed range"""
    allowable_max = Property('AllowableMax', 0.0)
    allowable_min = Property('AllowableMin', 0.0)
    allowable_numeric_values = Property('AllowableNumericValues', islist=True)
    control_mode = Property('ControlMode', '')
    data_source_uri = Property('DataSourceUri', '')
    reading = Property('Reading', 0.0)
    reading_units = Property('ReadingUnits', '')
    setting_max = Property('SettingMax', 0.0)
    setting_min = Property('SettingMin', 0.0)

class ControlSingleExcerpt(Record):
    """A control with a single set point, such as a power limit"""
    allowable_max = Property('AllowableMax', 0.0)
    allowable_min = Property('AllowableMin', 0.0)
    control_mode = Property('ControlMode', '')
    data_source_uri = Property('DataSourceUri', '')
    reading = Property('Reading', 0.0)
    reading_units = Property('ReadingUnits', '')
    set_point = Property('SetPoint', 0.0)

class SensorExcerpt(Record):
    data_source_uri = Property('DataSourceUri', '')
    reading = Property('Reading', 0.0)

class SensorPowerExcerpt(SensorExcerpt):
    apparent_va = Property('ApparentVA', 0.0)
    phase_angle_degrees = Property('PhaseAngleDegrees', 0.0)
    power_factor = Property('PowerFactor', 0.0)
    reactive_var = Property('ReactiveVAR', 0.0)

class SensorEnergykWhExcerpt(SensorExcerpt):
    apparent_kvah = Property('ApparentkVAh', 0.0)
    lifetime_reading = Property('LifetimeReading', 0.0)
    reactive_kvarh = Property('ReactivekVARh', 0.0)
    sensor_reset_time = Property('SensorResetTime', '')

class SensorFanArrayExcerpt(SensorExcerpt):
    device_name = Property('DeviceName', '')
    physical_context = Property('PhysicalContext', '')
    physical_sub_context = Property('PhysicalSubContext', '')
    speed_rpm = Property('SpeedRPM', 0.0)
