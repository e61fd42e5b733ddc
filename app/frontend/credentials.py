"""
Client-side cache for the user's own provider API keys.
"""

from typing import MutableMapping, Optional

SUPADATA_KEY_NAME = "supadataApiKey"
DEEPSEEK_KEY_NAME = "deepseekApiKey"


class CredentialStore:
    """Key-value store for the two provider keys, with explicit save and clear."""

    def __init__(self, storage: MutableMapping[str, str]):
        self.storage = storage

    @staticmethod
    def _clean(value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        return value or None

    @property
    def supadata_api_key(self) -> Optional[str]:
        return self._clean(self.storage.get(SUPADATA_KEY_NAME))

    @property
    def deepseek_api_key(self) -> Optional[str]:
        return self._clean(self.storage.get(DEEPSEEK_KEY_NAME))

    @property
    def has_saved_keys(self) -> bool:
        return bool(self.supadata_api_key or self.deepseek_api_key)

    def save(self, supadata_api_key: Optional[str] = None, deepseek_api_key: Optional[str] = None):
        """Store whichever keys are non-empty; blank ones leave the stored value alone."""
        supadata_api_key = self._clean(supadata_api_key)
        deepseek_api_key = self._clean(deepseek_api_key)

        if supadata_api_key:
            self.storage[SUPADATA_KEY_NAME] = supadata_api_key
        if deepseek_api_key:
            self.storage[DEEPSEEK_KEY_NAME] = deepseek_api_key

    def clear(self):
        """Forget both keys."""
        self.storage.pop(SUPADATA_KEY_NAME, None)
        self.storage.pop(DEEPSEEK_KEY_NAME, None)
