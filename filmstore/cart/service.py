from typing import Dict, Iterable, List

from .schemas import CartGroup, CartLine


def group_key(line: CartLine) -> str:
    return f"{line.name}|{line.image}|{line.price}"


def group_cart_lines(lines: Iterable[CartLine]) -> List[CartGroup]:
    """Collapse cart lines of the same movie and price into display groups.

    Every line lands in exactly one group; a group's ``total_amount`` is the
    sum of its lines' order amounts and ``cart_ids`` keeps their encounter
    order. Groups come back sorted by name; groups sharing a name keep the
    order in which they were first seen.
    """
    groups: Dict[str, CartGroup] = {}

    for line in lines:
        key = group_key(line)
        group = groups.get(key)
        if group is None:
            group = CartGroup(
                key=key,
                name=line.name,
                image=line.image,
                price=line.price,
                total_amount=0,
            )
            groups[key] = group

        group.total_amount += line.order_amount
        group.cart_ids.append(line.cart_id)

    return sorted(groups.values(), key=lambda g: g.name)


def cart_total(groups: Iterable[CartGroup]) -> int:
    return sum(group.price * group.total_amount for group in groups)
