import sys
import typedfish

from typedfish.common import CollectionError
from typedfish.schemas import list_referenced_drives

# Connect using the BMC address, account name, and password to send https
# requests
bmc_host = "https://10.0.0.100"
login_account = "admin"
login_password = "password"
drives_uri = "/redfish/v1/Systems/1/Storage/1/Drives"

## Create a REDFISH object
REDFISH_OBJ = typedfish.redfish_client(base_url=bmc_host, \
                username=login_account, password=login_password, timeout=30)

# Login into the server and create a session
REDFISH_OBJ.login(auth="session")

try:
    drives = list_referenced_drives(REDFISH_OBJ, drives_uri)
except CollectionError as excp:
    sys.stderr.write("%s\n" % excp)
    drives = excp.members

# Turn on the write cache of every drive; only changed drives are patched
for drive in drives:
    drive.write_cache_enabled = True
    if drive.update():
        sys.stdout.write("Updated %s\n" % drive.odata_id)

# Logout of the current session
REDFISH_OBJ.logout()
