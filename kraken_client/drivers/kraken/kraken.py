# -*- coding: utf-8 -*-
# kraken_client/drivers/kraken/kraken.py
# Kraken REST client: one method per documented endpoint.
# Each method only shapes its parameters and delegates to the RequestAgent.

from kraken_client.drivers.kraken.agent import RequestAgent
from kraken_client.drivers.kraken.params import (
    AddOrderParams,
    AssetPairsParams,
    AssetsParams,
    BalanceParams,
    CancelOrderParams,
    ClosedOrdersParams,
    DepositAddressesParams,
    DepositMethodsParams,
    DepositStatusParams,
    DepthParams,
    LedgersParams,
    OhlcParams,
    OpenOrdersParams,
    OpenPositionsParams,
    OrdersInfoParams,
    QueryLedgersParams,
    SpreadParams,
    TickerParams,
    TradeBalanceParams,
    TradesHistoryParams,
    TradesInfoParams,
    TradesParams,
    TradeVolumeParams,
    WithdrawCancelParams,
    WithdrawInfoParams,
    WithdrawParams,
    WithdrawStatusParams,
)


class KrakenClient(object):
    """Kraken REST API client.

    Every endpoint method takes either a params record (see params.py), a
    dict, or keyword arguments:

        client.get_ticker_information(pair='XBTUSD')
        client.add_standard_order(AddOrderParams(pair='XBTUSD', type='buy', ...))
    """

    def __init__(self, auth=None, config=None, transport=None, raw_agent=None):
        self.raw_agent = raw_agent or RequestAgent(auth=auth, config=config, transport=transport)

    def is_upgraded(self):
        return self.raw_agent.is_upgraded()

    def upgrade(self, new_auth):
        self.raw_agent.upgrade(new_auth)

    def close(self):
        """Release the underlying HTTP session."""
        self.raw_agent.transport.close()

    def _public(self, endpoint, record_cls, params, kwargs):
        record = record_cls.build(params, **kwargs)
        return self.raw_agent.get_public_endpoint(endpoint, record.as_dict())

    def _private(self, endpoint, record_cls, params, kwargs):
        record = record_cls.build(params, **kwargs)
        return self.raw_agent.post_to_private_endpoint(endpoint, record.as_dict())

    # ---- Public market data ----
    def get_server_time(self):
        return self.raw_agent.get_public_endpoint('Time')

    def get_asset_info(self, params=None, **kwargs):
        return self._public('Assets', AssetsParams, params, kwargs)

    def get_tradable_asset_pairs(self, params=None, **kwargs):
        return self._public('AssetPairs', AssetPairsParams, params, kwargs)

    def get_ticker_information(self, params=None, **kwargs):
        """Ticker for one or more comma separated pairs, e.g. pair='XBTUSD'."""
        return self._public('Ticker', TickerParams, params, kwargs)

    def get_ohlc_data(self, params=None, **kwargs):
        return self._public('OHLC', OhlcParams, params, kwargs)

    def get_order_book(self, params=None, **kwargs):
        return self._public('Depth', DepthParams, params, kwargs)

    def get_recent_trades(self, params=None, **kwargs):
        return self._public('Trades', TradesParams, params, kwargs)

    def get_recent_spread_data(self, params=None, **kwargs):
        return self._public('Spread', SpreadParams, params, kwargs)

    # ---- Private user data ----
    def get_account_balance(self, params=None, **kwargs):
        return self._private('Balance', BalanceParams, params, kwargs)

    def get_trade_balance(self, params=None, **kwargs):
        return self._private('TradeBalance', TradeBalanceParams, params, kwargs)

    def get_open_orders(self, params=None, **kwargs):
        return self._private('OpenOrders', OpenOrdersParams, params, kwargs)

    def get_closed_orders(self, params=None, **kwargs):
        return self._private('ClosedOrders', ClosedOrdersParams, params, kwargs)

    def query_orders_info(self, params=None, **kwargs):
        return self._private('QueryOrders', OrdersInfoParams, params, kwargs)

    def get_trades_history(self, params=None, **kwargs):
        return self._private('TradesHistory', TradesHistoryParams, params, kwargs)

    def query_trades_info(self, params=None, **kwargs):
        return self._private('QueryTrades', TradesInfoParams, params, kwargs)

    def get_open_positions(self, params=None, **kwargs):
        return self._private('OpenPositions', OpenPositionsParams, params, kwargs)

    def get_ledgers_info(self, params=None, **kwargs):
        return self._private('Ledgers', LedgersParams, params, kwargs)

    def query_ledgers(self, params=None, **kwargs):
        return self._private('QueryLedgers', QueryLedgersParams, params, kwargs)

    def get_trade_volume(self, params=None, **kwargs):
        """pass fee_info=True (wire name 'fee-info') to get fee tiers."""
        return self._private('TradeVolume', TradeVolumeParams, params, kwargs)

    # ---- Private user trading ----
    def add_standard_order(self, params=None, **kwargs):
        """
        Place an order.

        Required: pair, type ('buy'/'sell'), ordertype, volume.
        Conditional close order: close_ordertype, close_price, close_price2
        (sent as close[ordertype], close[price], close[price2]).
        validate=True only validates the order on Kraken's side.
        """
        return self._private('AddOrder', AddOrderParams, params, kwargs)

    def cancel_open_order(self, params=None, **kwargs):
        return self._private('CancelOrder', CancelOrderParams, params, kwargs)

    # ---- Private user funding ----
    def get_deposit_methods(self, params=None, **kwargs):
        return self._private('DepositMethods', DepositMethodsParams, params, kwargs)

    def get_deposit_addresses(self, params=None, **kwargs):
        return self._private('DepositAddresses', DepositAddressesParams, params, kwargs)

    def get_status_of_recent_deposits(self, params=None, **kwargs):
        return self._private('DepositStatus', DepositStatusParams, params, kwargs)

    def get_withdrawal_information(self, params=None, **kwargs):
        return self._private('WithdrawInfo', WithdrawInfoParams, params, kwargs)

    def withdraw_funds(self, params=None, **kwargs):
        return self._private('Withdraw', WithdrawParams, params, kwargs)

    def get_status_of_recent_withdrawals(self, params=None, **kwargs):
        return self._private('WithdrawStatus', WithdrawStatusParams, params, kwargs)

    def request_withdrawal_cancellation(self, params=None, **kwargs):
        return self._private('WithdrawCancel', WithdrawCancelParams, params, kwargs)


def get_client(auth=None, config=None, transport=None):
    """Factory: a KrakenClient, authenticated when auth is given."""
    return KrakenClient(auth=auth, config=config, transport=transport)
