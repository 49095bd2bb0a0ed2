import os, yaml
from dataclasses import dataclass, fields, replace
from ceobrief.errors import ConfigError

ENV_KEYS = {
    "telegram_token": "TELEGRAM_BOT_TOKEN",
    "telegram_chat_id": "TELEGRAM_CHAT_ID",
    "repo": "GITHUB_REPO",
    "timeout": "TELEGRAM_TIMEOUT",
}
NUMERIC = ("utc_offset_hours", "timeout")

@dataclass(frozen=True)
class BriefConfig:
    priorities_path: str = os.path.join("ops", "priorities.md")
    briefs_dir: str = os.path.join("ops", "briefs")
    repo: str = "OWNER/REPO"
    company: str = "Netso"
    brief_time: str = "10:00"
    timezone_label: str = "Asia/Dhaka"
    utc_offset_hours: float = 6
    telegram_token: str = ""
    telegram_chat_id: str = ""
    timeout: float = 10

    @property
    def telegram_enabled(self) -> bool:
        return bool(self.telegram_token and self.telegram_chat_id)

    @classmethod
    def from_env(cls, environ=None, base: "BriefConfig | None" = None) -> "BriefConfig":
        env = os.environ if environ is None else environ
        vals = {k: env[v] for k, v in ENV_KEYS.items() if env.get(v)}
        return _with(base or cls(), vals)

def _with(cfg: BriefConfig, vals: dict) -> BriefConfig:
    known = {f.name for f in fields(BriefConfig)}
    vals = {k: v for k, v in vals.items() if k in known and v is not None}
    for k in NUMERIC:
        if k in vals:
            try: vals[k] = float(vals[k])
            except (TypeError, ValueError):
                raise ConfigError(f"{k} must be a number, got {vals[k]!r}") from None
    for k, v in vals.items():
        if k not in NUMERIC: vals[k] = str(v)
    return replace(cfg, **vals)

def _load_yaml(path: str) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"cannot read config {path}: {e}") from None
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from None
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(data).__name__}")
    return data

def load_config(path: str | None = None, environ=None, **overrides) -> BriefConfig:
    """Defaults <- YAML file (path or $BRIEF_CONFIG) <- environment <- explicit overrides."""
    env = os.environ if environ is None else environ
    path = path or env.get("BRIEF_CONFIG")
    cfg = _with(BriefConfig(), _load_yaml(path)) if path else BriefConfig()
    cfg = BriefConfig.from_env(env, base=cfg)
    return _with(cfg, overrides)
