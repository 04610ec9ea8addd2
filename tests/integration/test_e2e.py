"""End-to-end tests against a live recipe generation service.

Each test drives the RecipeConverter exactly as the CLI does and checks the
slot state, the presented result and the notifications raised.
"""

import pytest

from src.converter.converter import RecipeConverter
from src.models.models import InputMode, Notification, RequestStatus


class CollectingNotifier:
    def __init__(self) -> None:
        self.titles: list[str] = []

    def notify(self, notification: Notification) -> None:
        self.titles.append(notification.title)


@pytest.fixture
def notifier() -> CollectingNotifier:
    return CollectingNotifier()


@pytest.fixture
def converter(notifier) -> RecipeConverter:
    return RecipeConverter(notifier=notifier)


@pytest.mark.asyncio
async def test_ingredients_to_recipe(converter, notifier):
    converter.controller.set_text("2 cups flour\n3 eggs\n1 cup milk\n1 tbsp sugar")
    converter.servings.select_preset(4)

    state = await converter.submit()

    assert state.status is RequestStatus.SUCCESS, state.error
    assert converter.presenter.result.mode is InputMode.INGREDIENTS
    assert converter.presenter.result.text.strip()
    assert notifier.titles[-1] == "Recipe Converted"


@pytest.mark.asyncio
async def test_recipe_by_dish(converter, notifier):
    converter.controller.set_mode(InputMode.DISH)
    converter.controller.set_text("Spaghetti Carbonara")
    converter.controller.set_cuisine("italian")

    state = await converter.submit()

    assert state.status is RequestStatus.SUCCESS, state.error
    assert converter.presenter.heading == "Generated Recipe by Dish Name"
    assert notifier.titles[-1] == "Recipe Generated"


@pytest.mark.asyncio
async def test_validation_never_reaches_service(converter, notifier):
    converter.controller.set_mode(InputMode.DISH)
    converter.controller.set_text("   ")

    state = await converter.dispatcher.submit_dish()

    assert state.status is RequestStatus.IDLE
    assert notifier.titles == ["Input Required"]
