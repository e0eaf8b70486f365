import traceback
from typing import Callable, Optional

from rome_tour.collection.rome import Rome
from rome_tour.config import TourSettings
from rome_tour.guides.base import Guide
from rome_tour.utils.logger import write_log

# menu key -> (rome factory, opening line)
EXPLORE_OPTIONS = {
    "1": ("random_walk", "🎲 Starting random walk..."),
    "2": ("phone_app", "📱 Opening tourist app..."),
    "3": ("local_guide", "🎭 Meeting your local guide..."),
}

COMPARE_OPTIONS = [
    ("random_walk", "🎲 Random Walk", "Chaotic but adventurous!"),
    ("phone_app", "📱 Phone App", "Efficient and popular spots first"),
    ("local_guide", "🎭 Local Guide", "Insider knowledge and secrets"),
]


class InteractiveDemo:
    def __init__(self, rome: Optional[Rome] = None, settings: Optional[TourSettings] = None,
                 ask: Optional[Callable[[str], str]] = None, output: Optional[Callable[[str], None]] = None):
        self.rome = rome or Rome()
        self.settings = settings or TourSettings()
        self.ask = ask or input
        self.output = output or print

    def start(self):
        self.output(f"🏛️ Welcome to {self.rome.name}! Let's explore the city together!")
        self.output("=" * 50)
        self.show_available_places()
        self.main_menu()

    def show_available_places(self):
        self.output(f"\n🗺️ Places you can visit in {self.rome.name}:")
        for index, place in enumerate(self.rome.get_all_places(), start=1):
            self.output(f"   {index}. {place.name} ({place.category})")
        self.output("")

    def main_menu(self):
        while True:
            self.output(f"🚶 How would you like to explore {self.rome.name} today?")
            self.output("1. 🎲 Random Walk (get lost and discover accidentally)")
            self.output("2. 📱 Use Phone App (efficient, popular places first)")
            self.output("3. 🎭 Hire Local Guide (insider knowledge & secrets)")
            self.output("4. 📊 Compare all three methods")
            self.output("5. ❌ Exit")

            try:
                choice = self.ask("\nEnter your choice (1-5): ").strip()
                write_log("tour", f"Menu choice: {choice!r}")

                if choice in EXPLORE_OPTIONS:
                    self.explore_with(choice)
                elif choice == "4":
                    self.compare_all_methods()
                elif choice == "5":
                    self.output(f"\n👋 Arrivederci! Thanks for visiting {self.rome.name}!")
                    return
                else:
                    self.output("❌ Invalid choice. Please try again.\n")
            except EOFError:
                self.output(f"\n👋 Arrivederci! Thanks for visiting {self.rome.name}!")
                return

    def explore_with(self, choice: str):
        factory, description = EXPLORE_OPTIONS[choice]
        try:
            max_places = self.ask_for_number_of_places()
            guide = getattr(self.rome, factory)()

            self.output(f"\n{description}")
            self.output("-" * 40)

            self.simulate_visit(guide, max_places)
        except EOFError:
            raise
        except Exception:
            write_log("tour_errors", f"Exploration with {factory} failed: {traceback.format_exc()}")
            self.output("An error occurred during exploration. Returning to main menu.\n")
            return
        self.continue_or_return()

    def ask_for_number_of_places(self) -> int:
        upper = self.settings.max_places
        while True:
            answer = self.ask(f"How many places would you like to visit? (1-{upper}): ")
            try:
                num = int(answer.strip())
            except ValueError:
                self.output("❌ Please enter a valid number.")
                continue

            if 1 <= num <= upper:
                return num
            self.output(f"❌ Please enter a number between 1 and {upper}.")

    def simulate_visit(self, guide: Guide, max_places: int) -> int:
        count = 0
        while guide.has_next() and count < max_places:
            place = guide.next()
            if place is None:
                break
            self.output(f"\n✅ Now visiting: {place.name}")
            self.output(f"   Type: {place.category}")
            count += 1

            if count < max_places and guide.has_next():
                self.ask("   Press Enter to continue to next place...")

        self.output(f"\n🎉 Tour complete! You visited {count} amazing places in {self.rome.name}.")
        return count

    def compare_all_methods(self, pause: bool = True):
        limit = self.settings.compare_limit
        try:
            self.output("\n📊 Comparing all three exploration methods...")
            self.output("=" * 50)

            for factory, name, description in COMPARE_OPTIONS:
                guide = getattr(self.rome, factory)()
                self.output(f"\n{name} ({description}):")

                count = 0
                while guide.has_next() and count < limit:
                    if guide.next() is None:
                        break
                    count += 1
                self.output(f"   → Visited {count} places")

            self.output(f"\n💡 Notice: Same {self.rome.name}, completely different experiences!")
            self.output("This demonstrates the Iterator Pattern - same collection, different traversal strategies!")
        except Exception:
            write_log("tour_errors", f"Comparison failed: {traceback.format_exc()}")
            self.output("An error occurred during comparison. Returning to main menu.\n")
            return
        if pause:
            self.continue_or_return()

    def continue_or_return(self):
        self.output("\n" + "-" * 40)
        self.ask("Press Enter to return to main menu...")
        self.output("")
