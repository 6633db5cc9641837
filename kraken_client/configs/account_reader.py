#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Account config reader
Reads API keys from account.yaml:

    accounts:
      kraken:
        main:
          public_key: '...'
          private_key: '...'   # base64 secret

falling back to $KRAKEN_API_KEY / $KRAKEN_API_SECRET.
"""

import logging
import os
from typing import Any, Dict, List, Optional

import yaml

from kraken_client.configs.config_reader import resolve_config_dir
from kraken_client.drivers.kraken.agent import ApiAuth
from kraken_client.drivers.kraken.Config import ENV_API_KEY, ENV_API_SECRET

EXCHANGE = 'kraken'

logger = logging.getLogger(__name__)


class AccountReader:
    """Account config reader"""

    def __init__(self, config_dir: str = None):
        """
        Args:
            config_dir: directory holding account.yaml, see resolve_config_dir()
        """
        self.config_dir = resolve_config_dir(config_dir)
        self.account_file = self.config_dir / 'account.yaml'
        self._config = None

    def _load_config(self) -> Dict[str, Any]:
        """Load account.yaml once; a missing file reads as no accounts."""
        if self._config is not None:
            return self._config

        if not self.account_file.exists():
            logger.info(f"no account file at {self.account_file}, using environment only")
            self._config = {}
            return self._config

        try:
            with open(self.account_file, 'r', encoding='utf-8') as f:
                self._config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.error(f"YAML parse error in {self.account_file}: {e}")
            raise ValueError(f"YAML parse error: {e}") from e
        return self._config

    def get_exchange_accounts(self) -> Dict[str, Dict[str, Any]]:
        """{account_name: {public_key, private_key}} for Kraken"""
        accounts = self._load_config().get('accounts') or {}
        return accounts.get(EXCHANGE) or {}

    def get_account(self, account: str) -> Dict[str, Any]:
        return self.get_exchange_accounts().get(account) or {}

    def get_kraken_credentials(self, account: str = 'main') -> Optional[ApiAuth]:
        """
        API keys for one account.

        Args:
            account: account name under accounts.kraken, default 'main'

        Returns:
            ApiAuth, or None when neither the file nor the environment has keys
        """
        account_config = self.get_account(account)
        public_key = account_config.get('public_key')
        private_key = account_config.get('private_key')

        if not (public_key and private_key):
            public_key = os.getenv(ENV_API_KEY)
            private_key = os.getenv(ENV_API_SECRET)
            if not (public_key and private_key):
                return None
            logger.info(f"kraken account '{account}' not configured, using {ENV_API_KEY}")

        return ApiAuth(public_key, private_key)

    def list_accounts(self) -> List[str]:
        return list(self.get_exchange_accounts().keys())

    def is_account_valid(self, account: str) -> bool:
        """True when the account has both keys set (non-empty)."""
        account_config = self.get_account(account)
        return all(str(account_config.get(k) or '').strip() for k in ('public_key', 'private_key'))

    def reload(self):
        """Re-read account.yaml"""
        self._config = None
        self._load_config()


def get_kraken_credentials(account: str = 'main', config_dir: str = None) -> Optional[ApiAuth]:
    """Convenience wrapper around AccountReader.get_kraken_credentials()"""
    return AccountReader(config_dir).get_kraken_credentials(account)


def list_accounts(config_dir: str = None) -> List[str]:
    """Convenience wrapper around AccountReader.list_accounts()"""
    return AccountReader(config_dir).list_accounts()
