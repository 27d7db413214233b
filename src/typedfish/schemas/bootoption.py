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
"""BootOption: one entry of a system's UEFI boot order"""

#---------Imports---------

from typedfish.common.entity import Entity, Link, Property

#---------End of imports---------

class BootSource(object):
    """ComputerSystem.BootSource"""
    NONE = 'None'
    PXE = 'Pxe'
    FLOPPY = 'Floppy'
    CD = 'Cd'
    USB = 'Usb'
    HDD = 'Hdd'
    BIOS_SETUP = 'BiosSetup'
    UTILITIES = 'Utilities'
    DIAGS = 'Diags'
    UEFI_SHELL = 'UefiShell'
    UEFI_TARGET = 'UefiTarget'
    SD_CARD = 'SDCard'
    UEFI_HTTP = 'UefiHttp'
    REMOTE_DRIVE = 'RemoteDrive'
    UEFI_BOOT_NEXT = 'UefiBootNext'
    RECOVERY = 'Recovery'

class BootOption(Entity):
    """A boot option; only its enabled flag can be changed"""
    readwrite_fields = ('BootOptionEnabled',)

    actions = Property('Actions', {})
    alias = Property('Alias', '')
    boot_option_enabled = Property('BootOptionEnabled', False)
    boot_option_reference = Property('BootOptionReference', '')
    display_name = Property('DisplayName', '')
    related_item = Link('RelatedItem', islist=True)
    related_item_count = Property('RelatedItem@odata.count', 0)
    uefi_device_path = Property('UefiDevicePath', '')

def get_boot_option(client, uri):
    """Get a BootOption instance from the service

    :param client: client to issue the request with.
    :type client: RestClientBase object.
    :param uri: URI of the boot option.
    :type uri: str.
    :returns: returns a BootOption object

    """
    return BootOption.get(client, uri)

def list_referenced_boot_options(client, link):
    """Get every BootOption of the collection at ``link``"""
    return BootOption.list_referenced(client, link)
