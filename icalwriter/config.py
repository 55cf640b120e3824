"""
Reading of calendar defaults (prodid, method, name, timezone) from a
config file.  The file holds named sections:

    {
        "default": {"prodid": "-//Example//Calendar//EN"},
        "work": {"inherits": "default", "name": "Work", "timezone": "Europe/Oslo"}
    }

JSON is always understood, YAML if pyyaml is installed.
"""
import json
import logging
import os

log = logging.getLogger("icalwriter")


def config_section(config, section="default", blacklist=None):
    """
    Returns the section with the keys of any "inherits" chain merged
    in.  Keys in the section itself win over inherited ones.  A section
    inheriting (directly or not) from itself stops the chain there.
    """
    if not blacklist:
        blacklist = set()
    blacklist.add(section)
    if section in config and "inherits" in config[section]:
        parent = config[section]["inherits"]
        if parent in blacklist:
            log.warning(f"config section {section} inherits from {parent} in a loop")
            ret = {}
        else:
            ret = config_section(config, parent, blacklist)
    else:
        ret = {}
    if section in config:
        ret.update(config[section])
    ret.pop("inherits", None)
    return ret


def read_config(fn):
    if not fn:
        cfgdir = f"{os.environ.get('HOME', '/')}/.config/"
        for config_file in (
            f"{cfgdir}/icalwriter/calendar.conf",
            f"{cfgdir}/icalwriter/calendar.yaml",
            f"{cfgdir}/icalwriter/calendar.json",
            "/etc/icalwriter/calendar.conf",
        ):
            cfg = read_config(config_file)
            if cfg:
                return cfg
        return None

    try:
        try:
            with open(fn, "rb") as config_file:
                return json.load(config_file)
        except json.decoder.JSONDecodeError:
            ## Late import.  yaml is an external module, and only
            ## installed with the yaml extra.
            try:
                import yaml

                try:
                    with open(fn, "rb") as config_file:
                        return yaml.load(config_file, yaml.SafeLoader)
                except yaml.YAMLError:
                    log.error(
                        f"config file {fn} exists but is neither valid json nor yaml.  Check the syntax."
                    )
            except ImportError:
                log.error(
                    f"config file {fn} exists but is not valid json, and pyyaml is not installed."
                )

    except FileNotFoundError:
        log.info("no config file found")
    except ValueError:
        log.error("error in config file.  It will be ignored", exc_info=True)
    return {}
