#!/usr/bin/env python3
"""
game_values Demo

Walks through the public API:
1. Building positions from Left and Right options
2. Hash-consing: identical structure, identical node
3. The partial order and confused positions
4. Sums, negation and difference
5. Nimbers, integers and outcome classes
6. Cache statistics
"""

import sys
sys.path.insert(0, '.')

from game_values import (
    GameContext,
    GameValue,
    Relation,
    comparison_table,
    make,
)


def section(title: str) -> None:
    print("\n" + "═" * 80)
    print(f"  {title}")
    print("═" * 80)


context = GameContext()

# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 1: BUILDING POSITIONS
# ═══════════════════════════════════════════════════════════════════════════════

section("SECTION 1: BUILDING POSITIONS")

zero = GameValue.zero(context)
one = make([zero], [], "1")
minus_one = make([], [zero], "-1")
star = make([zero], [zero], "*")

for value in (zero, one, minus_one, star):
    print(f"  {value.label:>4} = {value}")

# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 2: HASH-CONSING
# ═══════════════════════════════════════════════════════════════════════════════

section("SECTION 2: HASH-CONSING")

up = make([zero], [], "Up")
print(f"  'Up' built as {{0|}} shares the node of '1': {up.is_identical(one)}")
print(f"  digest(1) = {one.digest:#018x}")
print(f"  live nodes: {len(context.store)}")

# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 3: ORDER
# ═══════════════════════════════════════════════════════════════════════════════

section("SECTION 3: ORDER")

assert one != minus_one
assert one > zero
assert minus_one < zero
assert star.confused_with(zero)

fuzzy = make([one], [minus_one], "Fuzzy")
assert fuzzy.confused_with(zero)

values = [zero, one, minus_one, star, fuzzy]
table = comparison_table(values)
print("  relation table:")
print("        " + " ".join(f"{v.label:>6}" for v in values))
for value, row in zip(values, table):
    print(f"  {value.label:>6}" + " ".join(f"{Relation(code).name[:6]:>6}" for code in row))

# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 4: ARITHMETIC
# ═══════════════════════════════════════════════════════════════════════════════

section("SECTION 4: ARITHMETIC")

assert -one == minus_one
assert -minus_one == one
assert -star == star
assert one + minus_one == zero
assert star + star == zero
assert -(-one) == one
assert one + star == star + one
assert (one + star) + minus_one == one + (star + minus_one)

print(f"  1 + (-1) = {one + minus_one}  (equal to 0, not identical)")
print(f"  * + *    = {star + star}")
print(f"  1 + *    = {one + star}")
print(f"  -(-1) is labelled {(-(-one)).label!r}")

# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 5: NIMBERS AND INTEGERS
# ═══════════════════════════════════════════════════════════════════════════════

section("SECTION 5: NIMBERS AND INTEGERS")

star2 = GameValue.nimber(2, context)
star3 = GameValue.nimber(3, context)
print(f"  *2 + *3 == *: {star2 + star3 == star}")

three = GameValue.integer(3, context)
two = GameValue.integer(2, context)
print(f"  3 - 2 == 1: {three - two == one}")

for value in (zero, one, minus_one, star, star2 + star2):
    print(f"  outcome({value.label or value}) = {value.outcome().name}")

# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 6: CACHES
# ═══════════════════════════════════════════════════════════════════════════════

section("SECTION 6: CACHES")

for name, stats in context.stats().items():
    print(f"  {name:>8}: {stats}")

print("\nAll checks passed.")
