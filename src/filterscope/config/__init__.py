"""Configuration objects and helpers for filterscope.

Analysis parameters live in a YAML file (optionally under an ``analysis:``
block) and are parsed into :class:`~filterscope.config.runtime.FilterScopeConfig`,
which the CLI turns into the :class:`~filterscope.core.models.FilterSettings`
used by a run.
"""

from .runtime import FilterScopeConfig, config_from_mapping, load_config, save_config

__all__ = ["FilterScopeConfig", "config_from_mapping", "load_config", "save_config"]
