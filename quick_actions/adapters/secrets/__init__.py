"""Secret store adapters."""

from quick_actions.adapters.secrets.env_secrets import EnvSecretStore, secret_env_name

__all__ = ["EnvSecretStore", "secret_env_name"]
