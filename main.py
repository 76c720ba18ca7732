import sys

from rebalancer.calculator import calculate
from rebalancer.coercion import finite_or
from rebalancer.input_parser import (
    RebalanceRequest,
    is_fully_allocated,
    load_request,
    parse_category_line,
    parse_flag,
    total_target_allocation,
)
from rebalancer.logging_setup import configure_logging
from rebalancer.result_table import format_result_table


def prompt_request() -> RebalanceRequest:
    """Ask for the amount, the rounding flag and the categories."""
    request = RebalanceRequest()

    while True:
        amount = finite_or(input("Amount to invest: "), 0.0)
        if amount > 0:
            break
        print("Please enter a positive amount.")
    request.amount_to_invest = amount

    request.round_invested_amount = parse_flag(
        input("Invest whole amounts only? (y/n): ")
    )

    print("\nEnter one category per line as 'name, target %, current value[, ISIN]'.")
    print("Leave the line empty when done.\n")
    while True:
        line = input("Category: ").strip()
        if not line:
            if request.categories:
                break
            print("You must have at least one category.")
            continue
        try:
            request.categories.append(parse_category_line(line))
        except ValueError as exc:
            print(f"  ⚠  {exc}")

    return request


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    configure_logging()

    print("Rebalancing Calculator")
    print("Splits new money across your assets to move them toward target allocations.\n")

    if argv:
        try:
            request = load_request(argv[0])
        except (FileNotFoundError, ValueError) as exc:
            print(f"Error: {exc}")
            return 1
    else:
        request = prompt_request()

    if not is_fully_allocated(request.categories):
        total = total_target_allocation(request.categories)
        print(f"⚠  Target allocations add up to {total:.1f}%, not 100%.\n")

    result = calculate(
        request.amount_to_invest,
        request.round_invested_amount,
        request.categories,
    )

    print()
    print(format_result_table(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
