"""
Command line access to polynomial arithmetic. Polynomials are given as comma-separated coefficient lists, constant
term first, so that "-1,0,1" is x^2 - 1. For example:

    upoly --ring gf:7 divmod 1,0,1 1,1
    upoly gcd 2,-3,1 1,0,-1 --steps

A list starting with a minus sign looks like an option to argparse, so put it after "--":

    upoly compose -- -1,0,1 0,2
"""

import argparse
import sys
from fractions import Fraction

from .coefficient import Ring
from .euclid import monic_gcd, remainder_table
from .modint import GF
from .poly import Polynomial

RINGS = {
    'int': int,
    'float': float,
    'fraction': Fraction,
}


def parse_ring(name: str) -> Ring:
    """Look up a coefficient ring by name: one of int, float, fraction, or gf:P for a prime P."""
    if name.startswith('gf:'):
        try:
            return GF(int(name[3:]))
        except ValueError as e:
            raise argparse.ArgumentTypeError(str(e)) from e
    if name not in RINGS:
        raise argparse.ArgumentTypeError(f"Unknown ring {name!r}, expected one of {', '.join(RINGS)} or gf:P.")
    return RINGS[name]


def parse_scalar(text: str, ring: Ring):
    """
    Read one coefficient. Fractions and floats are parsed by their own constructors, anything else (int, GF(p)) is
    read as an integer first.
    """
    parse = ring if ring in (Fraction, float) else int
    return ring(parse(text.strip()))


def parse_poly(text: str, ring: Ring) -> Polynomial:
    """
    >>> parse_poly("-1, 0, 1/2", Fraction)
    Polynomial('1/2*x^2-1')
    """
    try:
        return Polynomial(*(parse_scalar(part, ring) for part in text.split(",")), ring=ring)
    except ValueError as e:
        raise ValueError(f"Could not read the coefficient list {text!r}: {e}") from e


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser('upoly', description='Dense univariate polynomial arithmetic')
    parser.add_argument('--ring', type=parse_ring, default=Fraction, help='Coefficient ring: int, float, fraction (default) or gf:P')
    parser.add_argument('--var', type=str, default='x', help='Name of the variable when printing')
    commands = parser.add_subparsers(dest='command', required=True)

    show = commands.add_parser('show', help='Print a polynomial')
    show.add_argument('p', help='Coefficients, constant term first')

    evaluate = commands.add_parser('eval', help='Evaluate a polynomial at a point')
    evaluate.add_argument('p', help='Coefficients, constant term first')
    evaluate.add_argument('value', help='Point to evaluate at')

    compose = commands.add_parser('compose', help='Print p(q(x))')
    compose.add_argument('p', help='Outer polynomial')
    compose.add_argument('q', help='Inner polynomial')

    division = commands.add_parser('divmod', help='Print the quotient and remainder of p / d')
    division.add_argument('p', help='Dividend')
    division.add_argument('d', help='Divisor')

    gcd = commands.add_parser('gcd', help='Print the monic greatest common divisor of a and b')
    gcd.add_argument('a')
    gcd.add_argument('b')
    gcd.add_argument('--steps', action='store_true', help='Also print each step of the Euclidean algorithm')

    return parser


def main(argv=None) -> int:
    parser = make_parser()
    args = parser.parse_args(argv)
    ring, var = args.ring, args.var

    def read(text: str) -> Polynomial:
        try:
            return parse_poly(text, ring)
        except ValueError as e:
            parser.error(str(e))

    try:
        if args.command == 'show':
            p = read(args.p)
            print(p.fmt(var=var))
            print(f"degree {p.degree()}")
        elif args.command == 'eval':
            try:
                value = parse_scalar(args.value, ring)
            except ValueError as e:
                parser.error(f"Could not read the point {args.value!r}: {e}")
            print(read(args.p)(value))
        elif args.command == 'compose':
            print(read(args.p).compose(read(args.q)).fmt(var=var))
        elif args.command == 'divmod':
            q, r = divmod(read(args.p), read(args.d))
            print(f"quotient: {q.fmt(var=var)}")
            print(f"remainder: {r.fmt(var=var)}")
        elif args.command == 'gcd':
            a, b = read(args.a), read(args.b)
            if args.steps:
                print(remainder_table(a, b).to_string(index=False))
            print(monic_gcd(a, b).fmt(var=var))
    except ZeroDivisionError as e:
        print(f"upoly: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
