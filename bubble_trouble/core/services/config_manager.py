"""
config_manager.py
-----------------
Configuration file loader.

Features:
- Supports .json, .yaml/.yml and .py config files
- Recursively merges loaded values over defaults
- Ignores '_notes' keys for human-readable configs
"""

import os
import json
import importlib.util

import yaml

from bubble_trouble.core.debug.debug_logger import DebugLogger


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a configuration file.

    Args:
        filename: Path to a .json, .yaml/.yml or .py file
        default_dict: Default fallback config
        strict: If True, raise exception on missing or unreadable file

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    try:
        if filename.endswith(".py"):
            data = _load_py_module(filename)
        elif filename.endswith((".yaml", ".yml")):
            data = _load_yaml(filename)
        else:
            data = _load_json(filename)

        if not isinstance(data, dict):
            raise ValueError(f"Top level of {filename} must be a mapping")

        return _merge_dicts(default_dict, data)

    except (json.JSONDecodeError, yaml.YAMLError, ValueError, OSError) as e:
        if strict:
            raise FileNotFoundError(f"Config not usable: {filename}") from e
        DebugLogger.warn(f"Failed to load {filename}: {e} - using defaults", category="loading")
        return _merge_dicts(default_dict, {})


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    """Load JSON config file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


def _load_yaml(path):
    """Load YAML config file. An empty file yields an empty dict."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)} (YAML)", category="loading")
    return data if data is not None else {}


def _load_py_module(path):
    """Load Python config file and return DEFAULT_CONFIG if present."""
    if not os.path.exists(path):
        raise FileNotFoundError(path)
    try:
        spec = importlib.util.spec_from_file_location("config_module", path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        DebugLogger.system(f"Loaded {os.path.basename(path)} (Python)", category="loading")
        return getattr(module, "DEFAULT_CONFIG", {})
    except (ImportError, AttributeError, SyntaxError) as e:
        DebugLogger.warn(f"Failed to load Python config {path}: {e}", category="loading")
        return {}


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = {k: (_merge_dicts(v, {}) if isinstance(v, dict) else v)
              for k, v in default.items() if k != "_notes"}
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
