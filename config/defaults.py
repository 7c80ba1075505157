# Author: Bradley R. Kinnard
# static defaults for generated visor and hypervisor configs
#
# every value written into a generated config that does not come from boot
# params lives here. builders deep-copy the nested tables before use.

# production service endpoints shared by both node kinds
DMSG_DISCOVERY_ADDR = "http://dmsg.discovery.skywire.skycoin.com"
TRANSPORT_DISCOVERY_ADDR = "http://transport.discovery.skywire.skycoin.com"
ROUTE_FINDER_ADDR = "http://routefinder.skywire.skycoin.com"
UPTIME_TRACKER_ADDR = "http://uptime-tracker.skywire.skycoin.com"

# public key of the route setup node visors register with
SETUP_NODE_PK = "026c5a07de617c5c488195b76e8671bf9e7ee654d0633933e202af9e111ffa358d"

# dmsg port the hypervisor listens on for visor connections
DMSG_HYPERVISOR_PORT = 46


VISOR_DEFAULTS = {
    # config format version understood by the visor
    "version": "1.0",
    # stcp listens on all interfaces; peers come from discovery, not a table
    "stcp": {
        "pk_table": None,
        "local_address": ":7777",
    },
    # one session is enough for a node behind a single uplink
    "dmsg": {
        "discovery": DMSG_DISCOVERY_ADDR,
        "sessions_count": 1,
    },
    # pty over dmsg; paths are on the image's persistent and runtime mounts
    "dmsg_pty": {
        "port": 22,
        "authorization_file": "/var/skywire-visor/dsmgpty/whitelist.json",
        "cli_network": "unix",
        "cli_address": "/run/skywire-visor/dmsgpty/cli.sock",
    },
    # transport logs must survive reboots, so they go under /var
    "transport": {
        "discovery": TRANSPORT_DISCOVERY_ADDR,
        "log_store": {
            "type": "file",
            "location": "/var/skywire-visor/transports",
        },
    },
    "routing": {
        "setup_nodes": [SETUP_NODE_PK],
        "route_finder": ROUTE_FINDER_ADDR,
        "route_finder_timeout": "10s",
    },
    "uptime_tracker": {
        "addr": UPTIME_TRACKER_ADDR,
    },
    "log_level": "info",
    # upper bound for apps to exit on visor shutdown
    "shutdown_timeout": "10s",
    # rpc is local only; the hypervisor reaches the visor over dmsg
    "interfaces": {
        "rpc": "localhost:3435",
    },
    # apps connect back to the visor on this address
    "app_server_addr": "localhost:5505",
    # how long a restarted visor waits before checking it came up
    "restart_check_delay": "1s",
    # app binaries ship read-only in the image; app state is persistent
    "apps_path": "/usr/bin/apps",
    "local_path": "/var/skywire-visor/apps",
}


# bundled apps, in the order they are written to the visor config
SKYCHAT_NAME = "skychat"
SKYCHAT_PORT = 1
SKYCHAT_ADDR = ":8001"

SKYSOCKS_NAME = "skysocks"
SKYSOCKS_PORT = 3

SKYSOCKS_CLIENT_NAME = "skysocks-client"
SKYSOCKS_CLIENT_PORT = 13
SKYSOCKS_CLIENT_ADDR = ":1080"


HYPERVISOR_DEFAULTS = {
    # user accounts for the web ui
    "db_path": "/var/skywire-hypervisor/users.db",
    "enable_auth": True,
    "dmsg_discovery": DMSG_DISCOVERY_ADDR,
    "dmsg_port": DMSG_HYPERVISOR_PORT,
    # web ui listens on all interfaces, served over tls
    "http_addr": ":8000",
    "enable_tls": True,
}

# session cookie settings; signing keys are generated per node
COOKIE_BLOCK_KEY_SIZE = 32
COOKIE_HASH_KEY_SIZE = 64
COOKIE_DEFAULTS = {
    "expires_duration": "12h",
    "path": "/",
    "domain": "",
}


# self-signed cert for the hypervisor web ui
CERT_VALIDITY_DAYS = 365
CERT_ORGANIZATION = "Skywire"
CERT_HOSTS = ["localhost", "127.0.0.1"]
