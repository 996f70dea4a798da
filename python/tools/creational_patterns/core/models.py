#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Data models for the creational patterns examples.

Products (pizzas and sandwiches) are plain dataclasses filled in step by step
by a cook. Orders and demo settings are pydantic models so that anything read
from a configuration file or the command line is validated on the way in.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import FoodKind


@dataclass
class Pizza:
    """A pizza; the value of each field is assigned by a PizzaMaker build step."""

    kind: ClassVar[FoodKind] = FoodKind.PIZZA

    flour: Optional[str] = None
    topping: Optional[str] = None
    cheese: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Sandwich:
    """A sandwich; the value of each field is assigned by a SandwichMaker build step."""

    kind: ClassVar[FoodKind] = FoodKind.SANDWICH

    bread: Optional[str] = None
    filling: Optional[str] = None
    cheese: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


Dish = Union[Pizza, Sandwich]


class Order(BaseModel):
    """A high-level request handed to a KitchenManager."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    food: FoodKind = Field(description="Which kind of food to prepare")
    base: str = Field(description="Flour for a pizza, bread for a sandwich")
    meat: str = Field(description="Pizza topping or sandwich filling")
    cheese: str = Field(description="Cheese to add")


class CookSpec(BaseModel):
    """A cook to hire when the kitchen is staffed from configuration."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    kind: FoodKind = Field(description="Which kind of food the cook prepares")
    name: str = Field(min_length=1, description="The cook's name")


class CharacterRequest(BaseModel):
    """A character to create through the CharacterFactory."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(description="Character name")
    weapon: str = Field(description="Requested weapon; not restricted here")


def _default_cooks() -> List[CookSpec]:
    return [
        CookSpec(kind=FoodKind.PIZZA, name="Anna"),
        CookSpec(kind=FoodKind.SANDWICH, name="Jeremy"),
    ]


class KitchenSettings(BaseModel):
    """How the demo kitchen is staffed."""

    model_config = ConfigDict(extra="forbid")

    manager_name: str = Field(default="Melissa", description="Kitchen manager name")
    cooks: List[CookSpec] = Field(
        default_factory=_default_cooks, description="Cooks, in hiring order"
    )


def _default_direct_orders() -> List[Order]:
    return [
        Order(food=FoodKind.PIZZA, base="wheat", meat="pepperoni", cheese="brick cheese"),
        Order(
            food=FoodKind.SANDWICH,
            base="italian",
            meat="chicken and mayo",
            cheese="parmesan",
        ),
    ]


def _default_orders() -> List[Order]:
    return [
        Order(food=FoodKind.PIZZA, base="bread", meat="ground beef", cheese="mozzarella"),
        Order(food=FoodKind.SANDWICH, base="whole grain", meat="pastrami", cheese="cheddar"),
    ]


def _default_characters() -> List[CharacterRequest]:
    return [
        CharacterRequest(name="John", weapon="Hammer"),
        CharacterRequest(name="Alicia", weapon="Scepter"),
    ]


class DemoConfig(BaseModel):
    """Everything the demo runs, with defaults matching the classic example."""

    model_config = ConfigDict(extra="forbid")

    kitchen: KitchenSettings = Field(default_factory=KitchenSettings)
    direct_orders: List[Order] = Field(
        default_factory=_default_direct_orders,
        description="Dishes prepared by handing a cook straight to the client",
    )
    orders: List[Order] = Field(
        default_factory=_default_orders,
        description="Orders fulfilled through the kitchen manager",
    )
    characters: List[CharacterRequest] = Field(default_factory=_default_characters)
    colorize: bool = Field(default=True, description="Colorize console output")

    @model_validator(mode="after")
    def _direct_orders_match_cooks(self) -> DemoConfig:
        """Direct order N is handed to cook N, so their kinds must agree."""
        cooks = self.kitchen.cooks
        if len(self.direct_orders) > len(cooks):
            raise ValueError(
                f"{len(self.direct_orders)} direct order(s) but only {len(cooks)} cook(s)"
            )
        for index, (order, cook) in enumerate(zip(self.direct_orders, cooks)):
            if order.food is not cook.kind:
                raise ValueError(
                    f"direct order {index} is a {order.food} but cook "
                    f"{cook.name!r} prepares {cook.kind}"
                )
        return self
