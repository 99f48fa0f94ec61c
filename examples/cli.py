"""
Interactive CLI — walks the checkout flow against the in-memory backend.

┌─────────────────────────────────────────────────────────────────────────┐
│  COMMAND          WHAT HAPPENS                                          │
├─────────────────────────────────────────────────────────────────────────┤
│  add CODE QTY     Cart only. The checkout reads it on confirm.          │
│  address TEXT     Edits the typed address (session address is backup). │
│  pay cod|gcash    Select payment method. Rejected while submitting.     │
│  confirm          Validate, then COD submits / Gcash opens the modal.   │
│  yes / cancel     Modal buttons.                                        │
│  fail MSG         Make the backend reject orders.                       │
└─────────────────────────────────────────────────────────────────────────┘

The HTTP clients talk to the FastAPI app in-process through ASGITransport.
"""

from __future__ import annotations

import httpx
from kungfu import Ok, Error

from checkout import CheckoutConfig, CheckoutController, PaymentMethod
from checkout.cart import MemoryCart
from checkout.client import HTTPOrderGateway, HTTPSessionVerifier
from checkout.flow import AwaitingConfirmation, Completed, CheckoutState
from checkout.logging import add_context, configure_logging
from checkout.totals import compute_totals
from examples._infra import MENU, ConsoleNavigator, banner
from examples.backend import SESSION_COOKIE, BackendStore, create_app, seed


# ═══════════════════════════════════════════════════════════════════════════════
# Help
# ═══════════════════════════════════════════════════════════════════════════════

HELP_TEXT = """
┌─────────────────────────────────────────────────────────────────────────────┐
│                              COMMANDS                                        │
├─────────────────────────────────────────────────────────────────────────────┤
│  menu                   List products                                       │
│  cart                   Show cart and totals                                │
│  add <code> <qty>       Add a product (e.g., add BELLY 1)                   │
│  address <text>         Type a delivery address                             │
│  pay <cod|gcash>        Choose payment method                               │
│  confirm                Confirm payment                                     │
│  yes                    Confirm in the Gcash modal                          │
│  cancel                 Close the Gcash modal                               │
│  fail [message|off]     Backend rejects orders until "fail off"             │
│  state                  Show checkout state                                 │
│  orders                 Orders stored by the backend                        │
│  help                   Show this help                                      │
│  quit                   Exit                                                │
└─────────────────────────────────────────────────────────────────────────────┘
"""


def print_help() -> None:
    print(HELP_TEXT)


def print_menu() -> None:
    print("\n┌────────────────────────────────────────────────┐")
    print("│                    MENU                         │")
    print("├────────────────────────────────────────────────┤")
    for entry in MENU.values():
        print(f"│  [{entry.code:5}] {entry.name:22} ₱{entry.price:>9.2f} │")
    print("└────────────────────────────────────────────────┘")


def print_state(state: CheckoutState) -> None:
    banner("CHECKOUT STATE")
    print(f"  phase:           {type(state.phase).__name__}")
    print(f"  payment method:  {state.payment_method.value}")
    print(f"  address:         {state.address!r}")
    print(f"  session address: {state.session_address!r}")
    print(f"  processing:      {state.is_processing}")
    print(f"  gcash modal:     {'open' if state.is_gcash_modal_open else 'closed'}")
    if state.error_message:
        print(f"  error:           {state.error_message}")


async def print_cart(cart: MemoryCart, config: CheckoutConfig) -> None:
    items = await cart.items()
    if not items:
        print("\n  (cart is empty)")
        return
    print()
    for item in items:
        print(f"    • {item.quantity}x {item.name:22} ₱{item.line_total:>9.2f}")
    money = compute_totals(items, config.delivery_fee).formatted()
    print(f"\n    subtotal  ₱{money['subtotal']:>10}")
    print(f"    delivery  ₱{money['deliveryFee']:>10}")
    print(f"    total     ₱{money['total']:>10}")


# ═══════════════════════════════════════════════════════════════════════════════
# Commands
# ═══════════════════════════════════════════════════════════════════════════════


async def cmd_add(cart: MemoryCart, code: str, qty: str) -> None:
    entry = MENU.get(code.upper())
    if entry is None:
        print(f"  ✗ Unknown product: {code}")
        return
    try:
        quantity = int(qty)
    except ValueError:
        print("  ✗ quantity must be a number")
        return
    await cart.add(entry.to_item(quantity))
    print(f"  ✓ {quantity}x {entry.name}")


async def cmd_confirm(controller: CheckoutController) -> None:
    match await controller.confirm_payment():
        case Ok(AwaitingConfirmation()):
            print("\n  Gcash: send the payment, then type 'yes' (or 'cancel').")
        case Ok(Completed(receipt)):
            print(f"\n  ✓ Order {receipt.order.joined_ids} placed")
        case Ok(phase):
            print(f"\n  {type(phase).__name__}")
        case Error(e):
            print(f"\n  ✗ {e.message}")


async def cmd_yes(controller: CheckoutController) -> None:
    match await controller.confirm():
        case Ok(receipt):
            print(f"\n  ✓ Order {receipt.order.joined_ids} placed, tracking {receipt.order.tracking_number}")
        case Error(e):
            print(f"\n  ✗ {e.message}")


def cmd_pay(controller: CheckoutController, method: str) -> None:
    methods = {"cod": PaymentMethod.COD, "gcash": PaymentMethod.GCASH}
    chosen = methods.get(method.lower())
    if chosen is None:
        print("  Usage: pay <cod|gcash>")
        return
    match controller.select_payment(chosen):
        case Ok(state):
            print(f"  ✓ Paying with {state.payment_method.value}")
        case Error(e):
            print(f"  ✗ {e.message}")


def cmd_orders(store: BackendStore) -> None:
    if not store.orders:
        print("\n  (no orders yet)")
        return
    print()
    for order in store.orders:
        print(
            f"    #{order.order_id} {order.product_type.value:7} ₱{order.amount:>9.2f} "
            f"{order.payment_method:6} {order.tracking_number}"
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Main Loop
# ═══════════════════════════════════════════════════════════════════════════════

BANNER = """
╔════════════════════════════════════════════════════════════════════════════╗
║                          CHECKOUT DEMO                                      ║
╚════════════════════════════════════════════════════════════════════════════╝
"""


async def run_cli() -> None:
    configure_logging()

    store = BackendStore()
    token = seed(store)
    config = CheckoutConfig.from_env().with_base_url("http://checkout.demo")

    transport = httpx.ASGITransport(app=create_app(store))
    async with httpx.AsyncClient(
        transport=transport,
        base_url=config.base_url,
        cookies={SESSION_COOKIE: token},
    ) as http:
        cart = MemoryCart()
        navigator = ConsoleNavigator()
        controller = CheckoutController(
            cart=cart,
            session=HTTPSessionVerifier(http, config),
            gateway=HTTPOrderGateway(http, config),
            navigator=navigator,
            config=config,
        )

        print(BANNER)
        match await controller.mount():
            case Ok(info):
                add_context(customer_id=info.customer_id)
                print(f"  Logged in as customer {info.customer_id}")
            case Error(e):
                print(f"  ✗ {e.message}")
                return

        print_help()
        print_menu()

        while True:
            try:
                line = input("\n> ").strip()
            except (EOFError, KeyboardInterrupt):
                print("\nBye!")
                break

            if not line:
                continue

            parts = line.split(maxsplit=1)
            cmd = parts[0].lower()
            arg = parts[1] if len(parts) > 1 else ""

            match cmd:
                case "quit" | "exit" | "q":
                    print("Bye!")
                    break

                case "help" | "h" | "?":
                    print_help()

                case "menu":
                    print_menu()

                case "cart":
                    await print_cart(cart, config)

                case "add":
                    args = arg.split()
                    if len(args) != 2:
                        print("  Usage: add <code> <qty>")
                        print("  Example: add BELLY 1")
                        continue
                    await cmd_add(cart, args[0], args[1])

                case "address":
                    match controller.set_address(arg):
                        case Ok(state):
                            print(f"  ✓ Delivering to {state.delivery_address or '(none)'}")
                        case Error(e):
                            print(f"  ✗ {e.message}")

                case "pay":
                    cmd_pay(controller, arg)

                case "confirm":
                    await cmd_confirm(controller)

                case "yes":
                    await cmd_yes(controller)

                case "cancel":
                    match controller.cancel_confirmation():
                        case Ok(_):
                            print("  Modal closed")
                        case Error(e):
                            print(f"  ✗ {e.message}")

                case "fail":
                    if arg.lower() == "off":
                        store.fail_with = None
                        print("  Backend accepts orders again")
                    else:
                        store.fail_with = (400, arg or None)
                        print("  Backend now rejects orders ('fail off' to stop)")

                case "state":
                    print_state(controller.state)

                case "orders":
                    cmd_orders(store)

                case _:
                    print(f"  ✗ Unknown command: {cmd}")
                    print("  Type 'help' for available commands.")

            if controller.state.is_terminal:
                print_state(controller.state)
                print("\nCheckout finished. Bye!")
                break
