# -*- coding: utf-8 -*-
# kraken_client/drivers/kraken/params.py
"""
Per-endpoint parameter records.

Each record lists its wire fields in order with a required flag. Required
fields are checked when the record is built, unknown fields are rejected,
and as_dict() yields exactly the field names Kraken expects, including
bracketed ('close[price]') and hyphenated ('fee-info') ones.

Keyword aliases: brackets and hyphens are not valid in Python names, so
close_price -> 'close[price]', fee_info -> 'fee-info'. Wire names are also
accepted through a mapping: AddOrderParams({'close[price]': 1})
"""

from kraken_client.core.kernel.errors import InvalidParameters


def _alias(wire_name):
    return wire_name.replace('[', '_').replace(']', '').replace('-', '_')


class EndpointParams(object):
    """Base record. Subclasses set FIELDS = ((wire_name, required), ...)."""

    FIELDS = ()
    EXTRA_FIELDS = ()

    @classmethod
    def fields(cls):
        return tuple(cls.FIELDS) + tuple(cls.EXTRA_FIELDS)

    def __init__(self, values=None, **kwargs):
        lookup = {}
        for wire_name, _required in self.fields():
            lookup[wire_name] = wire_name
            lookup[_alias(wire_name)] = wire_name

        merged = dict(values or {})
        merged.update(kwargs)

        self._values = {}
        for key, value in merged.items():
            wire_name = lookup.get(key)
            if wire_name is None:
                raise InvalidParameters("%s got an unknown field: %s" % (type(self).__name__, key))
            self._values[wire_name] = value

        missing = [name for name, required in self.fields() if required and self._values.get(name) is None]
        if missing:
            raise InvalidParameters("%s is missing required field(s): %s" % (type(self).__name__, ', '.join(missing)))

    @classmethod
    def build(cls, params=None, **kwargs):
        """Return params if it already is a cls, else construct one from a dict and/or kwargs."""
        if isinstance(params, cls):
            if kwargs:
                raise InvalidParameters("pass either a %s or keyword arguments, not both" % cls.__name__)
            return params
        if params is not None and not isinstance(params, dict):
            raise InvalidParameters("expected %s or dict, got %r" % (cls.__name__, type(params).__name__))
        return cls(params, **kwargs)

    def as_dict(self):
        """Wire mapping in declared field order, None values left out."""
        out = {}
        for wire_name, _required in self.fields():
            value = self._values.get(wire_name)
            if value is not None:
                out[wire_name] = value
        return out

    def __eq__(self, other):
        return type(self) is type(other) and self.as_dict() == other.as_dict()

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self.as_dict())


class PrivateParams(EndpointParams):
    """Private records additionally accept a two-factor 'otp'."""

    EXTRA_FIELDS = (('otp', False),)


# ---- Public market data ----
class AssetsParams(EndpointParams):
    FIELDS = (('info', False), ('aclass', False), ('asset', False))


class AssetPairsParams(EndpointParams):
    FIELDS = (('info', False), ('pair', False))


class TickerParams(EndpointParams):
    FIELDS = (('pair', True),)


class OhlcParams(EndpointParams):
    FIELDS = (('pair', True), ('interval', False), ('since', False))


class DepthParams(EndpointParams):
    FIELDS = (('pair', True), ('count', False))


class TradesParams(EndpointParams):
    FIELDS = (('pair', True), ('since', False))


class SpreadParams(EndpointParams):
    FIELDS = (('pair', True), ('since', False))


# ---- Private user data ----
class BalanceParams(PrivateParams):
    FIELDS = ()


class TradeBalanceParams(PrivateParams):
    FIELDS = (('aclass', False), ('asset', False))


class OpenOrdersParams(PrivateParams):
    FIELDS = (('trades', False), ('userref', False))


class ClosedOrdersParams(PrivateParams):
    FIELDS = (
        ('trades', False), ('userref', False), ('start', False),
        ('end', False), ('ofs', False), ('closetime', False),
    )


class OrdersInfoParams(PrivateParams):
    FIELDS = (('trades', False), ('userref', False), ('txid', True))


class TradesHistoryParams(PrivateParams):
    FIELDS = (('type', False), ('trades', False), ('start', False), ('end', False), ('ofs', False))


class TradesInfoParams(PrivateParams):
    FIELDS = (('txid', True), ('trades', False))


class OpenPositionsParams(PrivateParams):
    FIELDS = (('txid', True), ('docalcs', False))


class LedgersParams(PrivateParams):
    FIELDS = (
        ('aclass', False), ('asset', False), ('type', False),
        ('start', False), ('end', False), ('ofs', False),
    )


class QueryLedgersParams(PrivateParams):
    FIELDS = (('id', True),)


class TradeVolumeParams(PrivateParams):
    FIELDS = (('pair', False), ('fee-info', False))


# ---- Private user trading ----
class AddOrderParams(PrivateParams):
    FIELDS = (
        ('pair', True),
        ('type', True),
        ('ordertype', True),
        ('price', False),
        ('price2', False),
        ('volume', True),
        ('leverage', False),
        ('oflags', False),
        ('starttm', False),
        ('expiretm', False),
        ('userref', False),
        ('validate', False),
        ('close[ordertype]', False),
        ('close[price]', False),
        ('close[price2]', False),
    )


class CancelOrderParams(PrivateParams):
    FIELDS = (('txid', True),)


# ---- Private user funding ----
class DepositMethodsParams(PrivateParams):
    FIELDS = (('aclass', False), ('asset', True))


class DepositAddressesParams(PrivateParams):
    FIELDS = (('aclass', False), ('asset', True), ('method', True), ('new', False))


class DepositStatusParams(PrivateParams):
    FIELDS = (('aclass', False), ('asset', True), ('method', True))


class WithdrawInfoParams(PrivateParams):
    FIELDS = (('aclass', False), ('asset', True), ('key', True), ('amount', True))


class WithdrawParams(PrivateParams):
    FIELDS = (('aclass', False), ('asset', True), ('key', True), ('amount', True))


class WithdrawStatusParams(PrivateParams):
    FIELDS = (('aclass', False), ('asset', True), ('method', False))


class WithdrawCancelParams(PrivateParams):
    FIELDS = (('aclass', False), ('asset', True), ('refid', True))
