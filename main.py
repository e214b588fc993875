# main.py
import argparse
import json
import os
import numpy as np
from colorama import Fore, Style, init
from scooter_rentals.engine import ScooterGame, multiples_within
from scooter_rentals.models import ForecastTime
from scooter_rentals.diagnostics import Diagnostics
from scooter_rentals.baselines import random_agent, fixed_price_agent, greedy_agent, SmartAgent
from scooter_rentals.savefile import load_save_file, write_save_file
from scooter_rentals.scorer import calculate_profit
from scooter_rentals.errors import ManagementError
from scooter_rentals.cli import (
    InputError, InputClosedError, output, output_log, get_input_int, get_input_float,
    get_input_string, get_input_nothing, say_any_key,
)
from scooter_rentals.config import (
    DEFAULT_BUSINESS_NAME, PRICE_OF_ADVERTS, PRICE_OF_PARTS,
    PRICE_OF_SCOOTERS, RESALE_PRICE, SAVE_FILE_PATH,
)

init(autoreset=True)


def show_logs(game: ScooterGame):
    for log in game.pop_logs():
        output_log(log)


def pause():
    say_any_key()
    get_input_nothing()


def open_game(save_file_path: str, seed=None) -> ScooterGame:
    try:
        saved = load_save_file(save_file_path)
    except FileNotFoundError:
        saved = None
    except (OSError, ValueError) as e:
        output(f"Couldn't read the save file ({e}). Starting over.", Fore.RED)
        saved = None

    if saved is not None:
        game = ScooterGame.from_save_file(saved, seed=seed)
        output(f"Restoring saved game: {game.business.name} on day {game.day_num}.")
        return game

    output("What do you want your business to be called?")
    try:
        name = get_input_string()
    except InputError:
        name = ""
    if not name:
        output(f"That doesn't work. Let's use \"{DEFAULT_BUSINESS_NAME}\"")
        name = DEFAULT_BUSINESS_NAME
    game = ScooterGame.new(name, seed=seed)
    output(f"Opened a new Scooter business called {name}!!", Fore.GREEN)
    return game


def ask_rental_price() -> float:
    while True:
        output("How much do you want to charge for each rental today?")
        try:
            val = get_input_float()
        except InputClosedError:
            raise
        except InputError:
            output("Nope. That is not a real number. Give it another shot.")
            continue
        if val < 0.0:
            output("Nope. That is not a positive number. Give it another shot.")
        else:
            return val


def ask_quantity(prompt: str):
    output(prompt)
    try:
        return get_input_int()
    except InputError:
        output("That's not a real number.")
        return None


def buy_submenu(game: ScooterGame):
    b = game.business
    output(f"You have ${b.cash:.2f} cash on hand.")
    output("Ok, what do you want to buy?")
    output("1) New Scooters?")
    output("2) Scooter parts?")
    output("3) Go back to the main menu.")
    try:
        choice = get_input_int()
    except InputError:
        output("Use the numbers.")
        pause()
        return

    if choice == 1:
        item, price, buy = "scooters", PRICE_OF_SCOOTERS, b.buy_scooters
    elif choice == 2:
        item, price, buy = "parts", PRICE_OF_PARTS, b.buy_scooter_parts
    elif choice == 3:
        return
    else:
        output("That's not a thing you can do.")
        pause()
        return

    num = ask_quantity(f"Ok, {item} cost ${price:.2f}. How many?")
    if num is not None:
        if num * price > b.cash:
            num = multiples_within(b.cash, price)
            output(f"You can only afford {num}.")
        buy(num, price)
        show_logs(game)
    pause()


def sell_submenu(game: ScooterGame):
    b = game.business
    output(f"You have {b.working_scooters} working scooters you could sell.")
    output(f"You can get ${RESALE_PRICE:.2f} for each one.")
    num = ask_quantity("How many would you like to sell?")
    if num is not None:
        if num > b.working_scooters:
            num = b.working_scooters
            output(f"You only have {num} to sell.")
        b.sell_working_scooters(num, RESALE_PRICE)
        show_logs(game)
    pause()


def repair_submenu(game: ScooterGame):
    b = game.business
    reparable = min(b.broken_scooters, b.scooter_parts)
    output(f"You have enough parts to repair {reparable} of your broken scooters.")
    num = ask_quantity("How many do you want to repair?")
    if num is not None:
        num = min(num, reparable)
        b.repair_scooters(num)
        show_logs(game)
    pause()


def advert_submenu(game: ScooterGame):
    b = game.business
    output(f"You have ${b.cash:.2f} cash.")
    output(f"Each advertisement costs ${PRICE_OF_ADVERTS:.2f}.")
    if b.cash >= PRICE_OF_ADVERTS:
        num = ask_quantity("How many advertisements do you want to buy for tomorrow?")
        if num is not None:
            if num * PRICE_OF_ADVERTS > b.cash:
                num = multiples_within(b.cash, PRICE_OF_ADVERTS)
                output(f"You can only afford {num}.")
            b.buy_advertisements(num, PRICE_OF_ADVERTS)
            show_logs(game)
    else:
        output("You don't currently have enough cash to buy an advertisement.")
    pause()


def business_info(game: ScooterGame):
    b = game.business
    output(f"{b.name} Scooter shop has:", Fore.YELLOW)
    output(f"\t${b.cash:.2f} cash.")
    output(f"\t{b.working_scooters} working scooters, ready to rent.")
    output(f"\t{b.broken_scooters} broken scooters, unrentable until repaired.")
    output(f"\t{b.scooter_parts} parts for repairing scooters.")
    output(f"\t{b.advertisements} advertisements ready for tomorrow.")
    output(game.weather.describe(ForecastTime.TODAY))
    output(game.weather.describe(ForecastTime.TOMORROW))
    pause()


MENU = [
    ("Buy scooters or parts for repair?", buy_submenu),
    ("Sell working scooters", sell_submenu),
    ("Repair broken scooters", repair_submenu),
    ("Buy advertisements for tomorrow", advert_submenu),
    ("Get info on your business and the weather", business_info),
]


def main_menu(game: ScooterGame) -> bool:
    """Returns True to play another day, False to quit."""
    while True:
        output("What would you like to do?", Fore.YELLOW)
        for i, (label, _) in enumerate(MENU, start=1):
            output(f"{i}) {label}")
        output(f"{len(MENU) + 1}) Ready to move on to the next day")
        output(f"{len(MENU) + 2}) Quit the game.")

        try:
            choice = get_input_int()
        except InputClosedError:
            raise
        except InputError:
            output("Use the numbers.")
            continue

        if 1 <= choice <= len(MENU):
            try:
                MENU[choice - 1][1](game)
            except ManagementError as e:
                output(f"That didn't work: {e}", Fore.RED)
        elif choice == len(MENU) + 1:
            return True
        elif choice == len(MENU) + 2:
            return False
        else:
            output("That's not a thing you can do.")
        output("\n\n")


def play(save_file_path: str = SAVE_FILE_PATH, seed=None):
    output("Scooter Rentals", Fore.CYAN + Style.BRIGHT)
    game = open_game(save_file_path, seed)

    output("\n\n")
    if game.day_num == 1:
        output("It's your first day.")

    try:
        while True:
            output(f"--- DAY {game.day_num} ---", Fore.YELLOW)
            output(game.weather.describe(ForecastTime.TODAY))
            show_logs(game)

            price = ask_rental_price()
            receipt = game.rent(price)
            output(f"You made ${receipt.profit:.2f} today!", Fore.GREEN)
            output(f"{receipt.broken_scooters} scooters were broken today!")
            show_logs(game)
            pause()

            if not main_menu(game):
                break
            game.next_day()
    except InputClosedError:
        output("Input closed. Saving and quitting.", Fore.RED)

    write_save_file(game.to_save_file(), save_file_path)

    profit = calculate_profit(game.business)
    if profit > 0.0:
        output(f"You made a profit of ${profit:.2f}", Fore.GREEN)
    elif profit < 0.0:
        output(f"You had a loss of ${-profit:.2f}", Fore.RED)
    else:
        output("You broke even on your business. Could be worse.")


def run_simulation(agent_func, total_days=60, seed=42, agent_name="Agent", verbose=False):
    game = ScooterGame.new(f"{agent_name} Scooters", seed=seed)
    diagnostics = Diagnostics(agent_name)

    obs = game.observe()
    obs['_internal_metrics'] = {'nbv': 0, 'daily_profit': 0}

    for _ in range(total_days):
        if verbose:
            print(f"\n{Fore.YELLOW}--- DAY {obs['day']} ---{Style.RESET_ALL}")
            print(f"Cash: ${obs['cash']:.2f} | {obs['today']}")

        # Agent decides
        plan = agent_func(obs)

        # Environment steps
        obs = game.step(plan)

        diagnostics.record_step(obs, plan)

        if verbose:
            for log in obs['yesterday']['logs']:
                output_log(log)

    report = diagnostics.generate_report()

    if verbose:
        print(f"\n{Fore.GREEN}Simulation Complete.{Style.RESET_ALL}")
        print(f"Final Net Business Value: ${report['final_nbv']}")
        print("\n=== DIAGNOSTIC REPORT ===")
        print(f"Strategy: {report['strategy']}")
        print(f"Survival Days: {report['survival_days']}")
        print(f"Final Cash: ${report['final_cash']:.2f}")
        print(f"Mean Utilisation: {report['metrics']['mean_utilisation']:.0%}")
        print("=========================")

    return report


def run_baseline(total_days=60, seed=42, results_dir=None):
    print(f"{Fore.MAGENTA}=== STARTING BASELINE RUN ({total_days} days, seed {seed}) ==={Style.RESET_ALL}")

    agent_rng = np.random.RandomState(seed)
    agents = {
        "Random": lambda obs: random_agent(obs, agent_rng),
        "Fixed": fixed_price_agent,
        "Greedy": greedy_agent,
        "Smart": SmartAgent().act,
    }

    print(f"{'Agent':<10} | {'NBV':<12} | {'Strategy':<20}")
    print("-" * 50)

    reports = {}
    for name, func in agents.items():
        report = run_simulation(func, total_days=total_days, seed=seed, agent_name=name)
        nbv = report['final_nbv']
        color = Fore.GREEN if nbv > 0 else Fore.RED
        print(f"{name:<10} | {color}${nbv:>11,.2f}{Style.RESET_ALL} | {report['strategy']:<20}")
        reports[name] = report

    if results_dir:
        if not os.path.exists(results_dir):
            os.makedirs(results_dir)
        for name, report in reports.items():
            with open(os.path.join(results_dir, f"{name}.json"), "w") as f:
                json.dump(report, f, indent=2)
        print(f"\n{Fore.CYAN}Results saved to {results_dir}/ directory.{Style.RESET_ALL}")

    return reports


def main():
    parser = argparse.ArgumentParser(description="Run a scooter rental business, one day at a time")
    parser.add_argument("--save-file", type=str, default=SAVE_FILE_PATH, help="Where the game is saved")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the weather and rentals")
    parser.add_argument("--autoplay", action="store_true", help="Let the baseline agents play instead")
    parser.add_argument("--agent", type=str, default="all",
                        choices=["all", "random", "fixed", "greedy", "smart"], help="Agent for --autoplay")
    parser.add_argument("--days", type=int, default=60, help="Days per --autoplay run")
    parser.add_argument("--results-dir", type=str, default=None, help="Save --autoplay reports here")
    args = parser.parse_args()

    if not args.autoplay:
        play(args.save_file, args.seed)
        return

    seed = args.seed if args.seed is not None else 42
    if args.agent == "all":
        run_baseline(args.days, seed, args.results_dir)
    else:
        agent_rng = np.random.RandomState(seed)
        agents = {
            "random": lambda obs: random_agent(obs, agent_rng),
            "fixed": fixed_price_agent,
            "greedy": greedy_agent,
            "smart": SmartAgent().act,
        }
        run_simulation(agents[args.agent], total_days=args.days, seed=seed,
                       agent_name=args.agent.capitalize(), verbose=True)


if __name__ == "__main__":
    main()
