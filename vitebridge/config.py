"""
Config system - Layered configuration for asset resolution.

Merge precedence (later overrides earlier):
defaults < environment descriptor file < VITE_* environment variables < overrides
"""

from typing import Any, Dict, Optional
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
import json
import logging
import os

from dotenv import dotenv_values

from .faults import ConfigInvalidFault
from .handles import trailingslashit

logger = logging.getLogger("vitebridge.config")


@dataclass(frozen=True)
class ViteConfig:
    """
    Settings for one ViteAssets instance.

    Attributes:
        prefix: Namespace prepended to every handle
        root_dir: Project root; relative paths resolve against it
        base_url: Public URL of the build output directory
        manifest_path: Manifest location relative to root_dir
        dev_host: Dev server host
        dev_port: Dev server port
        dev_scheme: Dev server scheme
        dev_url: Explicit dev server URL (wins over host/port)
        env_file: Environment descriptor relative to root_dir
        probe_timeout: Dev server probe timeout (None = socket default)
        strict: Report unresolved entries from flushes
    """
    prefix: str
    root_dir: Path = field(default_factory=Path.cwd)
    base_url: str = "/"
    manifest_path: str = "dist/.vite/manifest.json"
    dev_host: str = "localhost"
    dev_port: int = 5173
    dev_scheme: str = "http"
    dev_url: Optional[str] = None
    env_file: Optional[str] = ".env"
    probe_timeout: Optional[float] = None
    strict: bool = False

    def __post_init__(self):
        if not self.prefix:
            raise ConfigInvalidFault("prefix", "must not be empty")
        if not isinstance(self.dev_port, int) or not 0 < self.dev_port < 65536:
            raise ConfigInvalidFault("dev_port", f"{self.dev_port!r} is not a TCP port")
        object.__setattr__(self, "root_dir", Path(self.root_dir))
        object.__setattr__(self, "base_url", trailingslashit(self.base_url))

    @property
    def manifest_file(self) -> Path:
        return self.root_dir / self.manifest_path

    @property
    def resolved_dev_url(self) -> str:
        if self.dev_url:
            return trailingslashit(self.dev_url)
        return f"{self.dev_scheme}://{self.dev_host}:{self.dev_port}/"

    def with_overrides(self, **overrides: Any) -> "ViteConfig":
        return replace(self, **overrides)


class ConfigLoader:
    """
    Loads and merges ViteConfig values from multiple sources.

    The environment descriptor is a ``.env`` file (parsed with python-dotenv)
    or a YAML/JSON mapping. Recognised keys, case-insensitive: HOST, PORT,
    SCHEME, DEV_URL, BASE_URL, MANIFEST, STRICT, PROBE_TIMEOUT. They need
    the ``VITE_`` prefix in a ``.env`` file and may omit it in a mapping.
    """

    KEYS = {
        "host": "dev_host",
        "port": "dev_port",
        "scheme": "dev_scheme",
        "dev_url": "dev_url",
        "base_url": "base_url",
        "manifest": "manifest_path",
        "strict": "strict",
        "probe_timeout": "probe_timeout",
    }

    def __init__(self, env_prefix: str = "VITE_"):
        self.env_prefix = env_prefix
        self.config_data: Dict[str, Any] = {}

    @classmethod
    def load(
        cls,
        prefix: str,
        root_dir: Optional[Path] = None,
        env_file: Optional[str] = ".env",
        env_prefix: str = "VITE_",
        use_environ: bool = True,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> ViteConfig:
        """
        Build a ViteConfig from all sources.

        Args:
            prefix: Handle namespace
            root_dir: Project root (defaults to cwd)
            env_file: Environment descriptor path relative to root_dir
            env_prefix: Prefix for environment variables
            use_environ: Read os.environ
            overrides: Manual overrides (highest precedence)

        Returns:
            Validated ViteConfig

        Raises:
            ConfigurationError: If a value cannot be coerced
        """
        root = Path(root_dir) if root_dir else Path.cwd()
        loader = cls(env_prefix=env_prefix)

        if env_file:
            loader._load_descriptor(root / env_file)

        if use_environ:
            loader._load_mapping(os.environ, require_prefix=True)

        if overrides:
            loader.config_data.update({k: v for k, v in overrides.items() if v is not None})

        data = loader._coerce(loader.config_data)
        known = {f.name for f in fields(ViteConfig)}
        unknown = set(data) - known
        if unknown:
            raise ConfigInvalidFault(", ".join(sorted(unknown)), "unknown setting")

        return ViteConfig(prefix=prefix, root_dir=root, env_file=env_file, **data)

    def _load_descriptor(self, path: Path):
        """Load the environment descriptor, if present."""
        if not path.is_file():
            logger.debug(f"No environment descriptor at {path}")
            return

        require_prefix = False
        if path.suffix in (".yaml", ".yml"):
            import yaml
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        elif path.suffix == ".json":
            with open(path) as f:
                data = json.load(f)
        else:
            # Only VITE_* keys in a .env file
            data = dotenv_values(path)
            require_prefix = True

        if not isinstance(data, dict):
            raise ConfigInvalidFault(str(path), "environment descriptor must be a mapping")

        logger.debug(f"Loaded environment descriptor {path}")
        self._load_mapping(data, require_prefix=require_prefix)

    def _load_mapping(self, data: Dict[str, Any], require_prefix: bool):
        for raw_key, value in data.items():
            key = str(raw_key).lower()
            prefix = self.env_prefix.lower()
            if key.startswith(prefix):
                key = key[len(prefix):]
            elif require_prefix:
                continue

            if key in self.KEYS and value is not None:
                self.config_data[self.KEYS[key]] = value

    def _coerce(self, data: Dict[str, Any]) -> Dict[str, Any]:
        result = dict(data)

        if "dev_port" in result:
            try:
                result["dev_port"] = int(result["dev_port"])
            except (TypeError, ValueError):
                raise ConfigInvalidFault("dev_port", f"{result['dev_port']!r} is not an integer")

        if "probe_timeout" in result:
            try:
                result["probe_timeout"] = float(result["probe_timeout"])
            except (TypeError, ValueError):
                raise ConfigInvalidFault("probe_timeout", f"{result['probe_timeout']!r} is not a number")

        if "strict" in result and isinstance(result["strict"], str):
            result["strict"] = result["strict"].lower() in ("true", "yes", "1")

        return result
