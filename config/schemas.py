# Author: Bradley R. Kinnard
# schema definitions for the input records of config preparation

_hex_pubkey = {"type": "string", "pattern": "^[0-9a-fA-F]{66}$"}

prepare_config_schema = {
    "type": "object",
    "required": ["visor_conf", "hypervisor_conf", "tls_cert", "tls_key"],
    "properties": {
        "visor_conf": {"type": "string", "minLength": 1},
        "hypervisor_conf": {"type": "string", "minLength": 1},
        "tls_cert": {"type": "string", "minLength": 1},
        "tls_key": {"type": "string", "minLength": 1}
    },
    "additionalProperties": False
}

boot_params_schema = {
    "type": "object",
    "required": ["mode"],
    "properties": {
        "mode": {
            "description": "deployment mode, by name or wire byte value",
            "oneOf": [
                {"type": "string", "enum": ["hypervisor", "visor"]},
                {"type": "integer", "minimum": 0, "maximum": 255}
            ]
        },
        "local_sk": {
            "type": ["string", "null"],
            "pattern": "^[0-9a-fA-F]{64}$",
            "description": "hex secret key, null or all-zero = generate"
        },
        "hypervisor_pks": {
            "type": "array",
            "items": _hex_pubkey,
            "default": []
        },
        "skysocks_passcode": {"type": "string", "default": ""}
    }
}
