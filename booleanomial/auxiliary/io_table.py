from booleanomial.core.base_object import BaseObject
from booleanomial.math.booleanomial import Booleanomial, _VARIABLE_LETTERS
from booleanomial.math.term_index import check_term_count
import itertools
import logging

log = logging.getLogger(__name__)

_COLUMN_STYLES = ["dim white", "green", "magenta", "yellow", "cyan", "dim white"]


class IOTable(BaseObject):
    """
    Truth table of a booleanomial. Keys are assignment tuples in variable order (a, b, c, ...).
    """

    def __init__(self, table: dict, symbols: list, title: str=None) -> None:
        self.table   = table
        self.symbols = symbols
        self.title   = title


    def __reprdir__(self):
        return ['title', 'symbols', 'table']


    def __eq__(self, other):
        return type(self) == type(other) and self.table == other.table and self.symbols == other.symbols


    def __getitem__(self, args):
        return self.table[tuple(args)]


    def __len__(self):
        return len(self.table)


    @staticmethod
    def from_booleanomial(poly: Booleanomial) -> 'IOTable':
        symbols = list(_VARIABLE_LETTERS[:poly.num_variables])
        table   = {}

        for args in itertools.product(*[list(range(2)) for _ in range(len(symbols))]):
            table[args] = poly.evaluate(*args)

        return IOTable(table, symbols, title=str(poly))


    def is_boolean(self) -> bool:
        return all(output in (0, 1) for output in self.table.values())


    def build_booleanomial(self) -> Booleanomial:
        """
        Reconstructs the multilinear polynomial taking these outputs.

        Each row contributes its output times the minterm of its assignment, the AND of every
        variable or its negation. Minterms are pairwise disjoint, so their weighted sum agrees with
        the table everywhere.

        Returns:
            Booleanomial: Polynomial with `2^len(symbols)` terms.
        """
        term_count = check_term_count(1 << len(self.symbols))
        symbols    = [Booleanomial.variable(term_count, k) for k in range(len(self.symbols))]
        one        = Booleanomial.one(term_count)
        func       = Booleanomial.zero(term_count)

        log.debug(f'Building booleanomial from {len(self.table)}-row table over {self.symbols}')

        for args, output in self.table.items():
            if not output:
                continue

            curr = one
            for sym, val in zip(symbols, args):
                if not val:
                    sym = ~sym

                curr &= sym

            func += curr * output

        return func


    def pretty(self, console: 'Console'=None):
        """
        Renders the table with `rich`. Rows where the function is non-zero are bold.

        Parameters:
            console (Console): Console to print to. Defaults to a new stdout console.
        """
        from rich.console import Console
        from rich.table import Table

        console = console or Console()
        table   = Table(title=self.title or "Truth Table", show_lines=True)

        styles  = itertools.cycle(_COLUMN_STYLES)
        columns = self.symbols + ['Output']

        for name, style in zip(columns, styles):
            table.add_column(name, style=style, no_wrap=True)

        for args, output in self.table.items():
            table.add_row(*[str(a) for a in args], str(output), style="bold" if output else None)

        console.print()
        console.print(table)
