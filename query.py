#!/usr/bin/env python3
"""Ad hoc query runner for the Recipe Converter.

Sends one request to the recipe generation service and prints the result.

Usage:
    python query.py "1 cup flour\n2 eggs\n1/2 cup sugar"           # Generate from ingredients
    python query.py --servings 4 --humidity --pro "2 cups flour"    # With options
    python query.py --image images/recipe_card.jpg                  # Photo to recipe
    python query.py --dish --cuisine italian "Lasagna"              # Recipe by dish name
    python query.py --debug --dish "Beef Stroganoff"                # Also print slot states
    echo "3 eggs" | python query.py -                               # Read text from stdin

Features:
- Same validation and request flow as the interactive converter
- Notifications printed as colored lines
- Result rendered as markdown under its heading
- Exit code 1 if the request was refused or failed
"""

import asyncio
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markdown import Markdown

from src.converter.capabilities import SelectedFile
from src.converter.converter import RecipeConverter
from src.converter.image_pipeline import guess_content_type
from src.models.models import CuisineTag, DietaryTag, InputMode, Notification, RequestStatus, Severity
from src.utils.config import PRESET_SERVINGS
from src.utils.logger import logger

console = Console()

USAGE = (
    "Usage: python query.py [--debug] [--servings N] [--humidity] [--pro] \"<ingredients>\"\n"
    "       python query.py [--debug] --image PATH\n"
    "       python query.py [--debug] [--cuisine C] [--dietary D] --dish \"<dish name>\""
)


class ConsoleNotifier:
    """Prints notifications instead of showing toasts."""

    def notify(self, notification: Notification) -> None:
        color = "red" if notification.severity is Severity.DESTRUCTIVE else "green"
        console.print(f"[{color}]● {notification.title}[/{color}] [dim]{notification.description}[/dim]")


class LocalFilePicker:
    """Hands a local file to the upload pipeline, declaring its type from magic bytes."""

    def __init__(self, path: Path) -> None:
        self.path = path

    async def pick_file(self) -> Optional[SelectedFile]:
        if not self.path.exists():
            console.print(f"[red]✗ Error: Image file not found: {self.path}[/red]")
            return None
        with open(self.path, "rb") as f:
            head = f.read(262)
        content_type = guess_content_type(head) or "application/octet-stream"
        return SelectedFile(name=self.path.name, content_type=content_type, path=self.path)


async def run_query(
    text: str,
    mode: InputMode,
    image_path: Optional[str] = None,
    servings: Optional[str] = None,
    humidity: bool = False,
    pro: bool = False,
    cuisine: str = "any",
    dietary: str = "none",
    debug: bool = False,
) -> bool:
    """Run one conversion and print the outcome.

    Returns:
        True if a recipe was produced.
    """
    picker = LocalFilePicker(Path(image_path)) if image_path else None
    converter = RecipeConverter(notifier=ConsoleNotifier(), file_picker=picker)

    converter.controller.set_mode(mode)
    converter.controller.set_text(text)
    converter.controller.set_humidity_adjust(humidity)
    converter.controller.set_pro_mode(pro)
    converter.controller.set_cuisine(cuisine)
    converter.controller.set_dietary(dietary)

    if servings is not None:
        if servings.isdigit() and int(servings) in PRESET_SERVINGS:
            converter.servings.select_preset(int(servings))
        else:
            converter.servings.select_custom()
            converter.servings.set_draft(servings)
            if converter.servings.apply() is None:
                return False

    if mode is InputMode.PHOTO and await converter.images.trigger_selection() is None:
        return False

    logger.info(f"Running {mode.value} request...")
    state = await converter.submit()

    if debug:
        console.print("[bold cyan]Debug Mode: Request Slots[/bold cyan]")
        console.print_json(data={m.value: converter.state(m).model_dump(mode="json") for m in InputMode})

    if state.status is not RequestStatus.SUCCESS or converter.presenter.result is None:
        return False

    console.print()
    console.print(f"[bold]{converter.presenter.heading}[/bold]")
    console.print(Markdown(converter.presenter.result.text))
    return True


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(USAGE)
        sys.exit(1)

    mode = InputMode.INGREDIENTS
    debug_mode = False
    humidity = False
    pro = False
    image_path = None
    servings = None
    cuisine = CuisineTag.ANY.value
    dietary = DietaryTag.NONE.value
    argv_start = 1

    def _flag_value(index: int, flag: str) -> str:
        if index >= len(sys.argv):
            print(f"Error: {flag} flag requires a value")
            sys.exit(1)
        return sys.argv[index]

    while argv_start < len(sys.argv) and sys.argv[argv_start].startswith("--"):
        flag = sys.argv[argv_start]
        if flag == "--debug":
            debug_mode = True
        elif flag == "--humidity":
            humidity = True
        elif flag == "--pro":
            pro = True
        elif flag == "--dish":
            mode = InputMode.DISH
        elif flag == "--image":
            mode = InputMode.PHOTO
            argv_start += 1
            image_path = _flag_value(argv_start, flag)
        elif flag == "--servings":
            argv_start += 1
            servings = _flag_value(argv_start, flag)
        elif flag == "--cuisine":
            argv_start += 1
            cuisine = _flag_value(argv_start, flag)
        elif flag == "--dietary":
            argv_start += 1
            dietary = _flag_value(argv_start, flag)
        else:
            print(f"Unknown flag: {flag}")
            sys.exit(1)
        argv_start += 1

    if cuisine not in {c.value for c in CuisineTag}:
        print(f"Error: unknown cuisine '{cuisine}', expected one of: {', '.join(c.value for c in CuisineTag)}")
        sys.exit(1)
    if dietary not in {d.value for d in DietaryTag}:
        print(f"Error: unknown dietary option '{dietary}', expected one of: {', '.join(d.value for d in DietaryTag)}")
        sys.exit(1)

    # Join all arguments after flags as the text (handles text with spaces)
    text = " ".join(sys.argv[argv_start:])
    if text == "-":
        text = sys.stdin.read()
    else:
        text = text.replace("\\n", "\n")

    if mode is not InputMode.PHOTO and not text:
        print("Error: No text provided")
        print(USAGE)
        sys.exit(1)

    try:
        ok = asyncio.run(
            run_query(
                text,
                mode,
                image_path=image_path,
                servings=servings,
                humidity=humidity,
                pro=pro,
                cuisine=cuisine,
                dietary=dietary,
                debug=debug_mode,
            )
        )
    except KeyboardInterrupt:
        logger.info("Query interrupted by user.")
        sys.exit(0)

    sys.exit(0 if ok else 1)
