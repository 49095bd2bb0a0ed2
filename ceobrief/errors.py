class BriefError(Exception):
    """Base for fatal brief-run failures; main() turns these into exit code 1."""

class MissingPriorities(BriefError):
    pass

class DeliveryError(BriefError):
    pass

class ConfigError(BriefError):
    pass
