"""Click parameter types."""

import click

from bankledger.utils.amount_parser import parse_amount


class AmountType(click.ParamType):
    """Money amount such as ``100``, ``12.50`` or ``$1,000.00``."""

    name = "amount"

    def convert(self, value, param, ctx):
        try:
            return parse_amount(str(value))
        except ValueError as e:
            self.fail(str(e), param, ctx)


AMOUNT = AmountType()
