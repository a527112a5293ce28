#!/usr/bin/env python3

"""Names baked into the generated ScriptForward sources."""

import os
from dataclasses import dataclass

# Default values, each overridable through SCRIPT_FORWARD_<KEY>
DEFAULT_SETTINGS = {
    # Bridging-capability type the forward class derives from
    "BRIDGE_BASE": "ScriptObject",
    # Marker base class that is never recursed into
    "MARKER_BASE": "ScriptAccess",
    "REGISTRY_INCLUDE": "ReflectionRegistry.h",
    "CLASS_SUFFIX": "ScriptForward",
    "SCRIPT_SUFFIX": "Script",
    "HEADER_EXTENSION": ".h",
    "IMPLEMENTATION_EXTENSION": ".C",
}


@dataclass(frozen=True)
class GeneratorSettings:
    """Template constants used by the parser and the emitter."""

    bridge_base: str = DEFAULT_SETTINGS["BRIDGE_BASE"]
    marker_base: str = DEFAULT_SETTINGS["MARKER_BASE"]
    registry_include: str = DEFAULT_SETTINGS["REGISTRY_INCLUDE"]
    class_suffix: str = DEFAULT_SETTINGS["CLASS_SUFFIX"]
    script_suffix: str = DEFAULT_SETTINGS["SCRIPT_SUFFIX"]
    header_extension: str = DEFAULT_SETTINGS["HEADER_EXTENSION"]
    implementation_extension: str = DEFAULT_SETTINGS["IMPLEMENTATION_EXTENSION"]


def get_settings() -> GeneratorSettings:
    """Get generator settings with environment variable overrides.

    Empty environment values are ignored.

    Returns:
        GeneratorSettings instance
    """
    values = {}
    for key, default in DEFAULT_SETTINGS.items():
        env_value = os.getenv(f"SCRIPT_FORWARD_{key}")
        values[key.lower()] = env_value.strip() if env_value and env_value.strip() else default

    return GeneratorSettings(**values)
