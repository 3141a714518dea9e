from scopewire._internal.providers import Lifetime, Provider, provider_name

__all__ = ["Lifetime", "Provider", "provider_name"]
