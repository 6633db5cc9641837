# -*- coding: utf-8 -*-
# kraken_client/drivers/kraken/driver.py
# Builds KrakenClient instances from configs/account.yaml and configs/kraken.yaml.

import logging

from kraken_client.configs.account_reader import AccountReader
from kraken_client.configs.config_reader import ConfigReader
from kraken_client.drivers.kraken.kraken import KrakenClient

logger = logging.getLogger(__name__)


def get_account_name_by_id(account_id=0, account_reader=None):
    """
    Map an account index onto the account names in account.yaml.

    Args:
        account_id: position in accounts.kraken (0 = first account)
        account_reader: AccountReader, a default one when None

    Returns:
        str: account name ('main' when nothing is configured)
    """
    reader = account_reader or AccountReader()
    accounts = reader.list_accounts()
    if not accounts:
        return 'main'
    if 0 <= account_id < len(accounts):
        return accounts[account_id]
    logger.warning(f"account id {account_id} out of range, available accounts: {accounts}")
    return accounts[0]


def init_KrakenClient(account_id=0, show=False, config_dir=None, transport=None):
    """
    Initialise a Kraken client for a configured account.

    Args:
        account_id: index into accounts.kraken of account.yaml
        show: log which account was picked
        config_dir: directory with account.yaml / kraken.yaml
        transport: optional Transport (RequestsTransport by default)

    Returns:
        KrakenClient: authenticated when keys were found, public-only otherwise
    """
    account_reader = AccountReader(config_dir)
    account_name = get_account_name_by_id(account_id, account_reader)
    credentials = account_reader.get_kraken_credentials(account_name)
    config = ConfigReader(config_dir).get_request_config()

    if show:
        logger.info(f"using kraken account: {account_name} (ID: {account_id}), "
                    f"authenticated: {credentials is not None}")
    if credentials is None:
        logger.warning(f"no API keys for kraken account '{account_name}', private endpoints will fail")

    return KrakenClient(auth=credentials, config=config, transport=transport)
