"""CLI interface using Typer."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from liftup.config import Settings, get_settings, reload_settings, set_unit_preference
from liftup.profiles import (
    AVAILABLE_GOALS,
    FITNESS_LEVELS,
    MacroCalculator,
    ProfileStoreError,
    UserProfile,
    is_sufficient_for_macros,
    load_profile,
    macros_to_dict,
    save_profile,
)
from liftup.profiles.store import profile_to_dict
from liftup.units import (
    UnitPreference,
    format_height,
    format_weight,
    height_unit,
    parse_height_input,
    parse_weight_input,
    weight_unit,
)

app = typer.Typer(
    help="LiftUp Fit nutrition targets and unit conversion",
    no_args_is_help=True,
)
console = Console()

logger = logging.getLogger(__name__)

# Subcommand groups
units_app = typer.Typer(help="Show or change the default unit preference")
convert_app = typer.Typer(help="Convert free-text height/weight to metric")
profile_app = typer.Typer(help="Manage the local user profile")

app.add_typer(units_app, name="units")
app.add_typer(convert_app, name="convert")
app.add_typer(profile_app, name="profile")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


# ============================================================================
# Helpers
# ============================================================================


def output_json(response: dict, file=None) -> None:
    """Output JSON response to stdout or file."""
    json_str = json.dumps(response, indent=2)
    if file:
        file.write(json_str)
    else:
        print(json_str)


def fail(command: str, message: str, json_output: bool, suggestions: Optional[list[str]] = None) -> NoReturn:
    """Report an error in the requested format and exit with status 1."""
    if json_output:
        response = {"success": False, "command": command, "errors": [message]}
        if suggestions:
            response["suggestions"] = suggestions
        output_json(response)
    else:
        console.print(f"[red]{escape(message)}[/red]")
        for suggestion in suggestions or []:
            console.print(suggestion)
    raise typer.Exit(1)


def load_settings(command: str, json_output: bool, reload: bool = False) -> Settings:
    """Load settings, exiting with an error if the config file is invalid."""
    try:
        return reload_settings() if reload else get_settings()
    except ValueError as e:
        fail(command, f"Invalid config: {e}", json_output,
             ["Fix the file or reset the default with: liftup units set imperial"])


def read_profile(command: str, json_output: bool) -> Optional[UserProfile]:
    """Load the stored profile, exiting with an error if it is malformed."""
    path = load_settings(command, json_output).profile.path
    try:
        return load_profile(path)
    except ProfileStoreError as e:
        fail(command, str(e), json_output)


def resolve_preference(command: str, units: Optional[str], json_output: bool) -> str:
    """Validate an explicit --units value or fall back to the configured default."""
    if units is None:
        return load_settings(command, json_output).units.preference
    try:
        return UnitPreference(units.lower()).value
    except ValueError:
        fail(command, f"Unknown unit preference: {units}", json_output,
             ["Use 'imperial' or 'metric'"])


# ============================================================================
# Unit Preference Commands
# ============================================================================


@units_app.command("show")
def units_show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the default unit preference."""
    preference = load_settings("units show", json_output).units.preference

    if json_output:
        output_json({
            "success": True,
            "command": "units show",
            "data": {
                "preference": preference,
                "height_unit": height_unit(preference),
                "weight_unit": weight_unit(preference),
            },
            "human_summary": f"Default units: {preference}",
        })
    else:
        console.print(f"Default units: [cyan]{preference}[/cyan]")
        console.print(f"  Height: {height_unit(preference)}")
        console.print(f"  Weight: {weight_unit(preference)}")


@units_app.command("set")
def units_set(
    preference: str = typer.Argument(..., help="imperial or metric"),
) -> None:
    """Persist the default unit preference."""
    try:
        set_unit_preference(preference.lower())
    except ValueError:
        fail("units set", f"Unknown unit preference: {preference}", False,
             ["Use 'imperial' or 'metric'"])

    console.print(f"[green]Default units set to {preference.lower()}[/green]")


# ============================================================================
# Conversion Commands
# ============================================================================


@convert_app.command("height")
def convert_height(
    text: str = typer.Argument(..., help="Height, e.g. \"5' 10\\\"\" or 178"),
    units: Optional[str] = typer.Option(None, "--units", "-u", help="imperial or metric"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Parse a height and show it in centimeters."""
    preference = resolve_preference("convert height", units, json_output)
    cm = parse_height_input(text, preference)
    if cm is None:
        fail("convert height", f"Could not parse height: {text!r}", json_output)

    if json_output:
        output_json({
            "success": True,
            "command": "convert height",
            "data": {"input": text, "units": preference, "height_cm": cm},
            "human_summary": f"{format_height(cm, preference)} = {cm:.1f} cm",
        })
    else:
        console.print(f"{format_height(cm, preference)} = [cyan]{cm:.1f} cm[/cyan]")


@convert_app.command("weight")
def convert_weight(
    text: str = typer.Argument(..., help="Weight in lbs (imperial) or kg (metric)"),
    units: Optional[str] = typer.Option(None, "--units", "-u", help="imperial or metric"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Parse a weight and show it in kilograms."""
    preference = resolve_preference("convert weight", units, json_output)
    kg = parse_weight_input(text, preference)
    if kg is None:
        fail("convert weight", f"Could not parse weight: {text!r}", json_output)

    if json_output:
        output_json({
            "success": True,
            "command": "convert weight",
            "data": {"input": text, "units": preference, "weight_kg": kg},
            "human_summary": f"{format_weight(kg, preference)} = {kg:.1f} kg",
        })
    else:
        console.print(f"{format_weight(kg, preference)} = [cyan]{kg:.1f} kg[/cyan]")


# ============================================================================
# Profile Commands
# ============================================================================


@profile_app.command("set")
def profile_set(
    name: Optional[str] = typer.Option(None, "--name", help="Full name"),
    age: Optional[int] = typer.Option(None, "--age", help="Age in years"),
    height: Optional[str] = typer.Option(
        None, "--height", help="Height in ft/in (imperial) or cm (metric)"
    ),
    weight: Optional[str] = typer.Option(
        None, "--weight", help="Weight in lbs (imperial) or kg (metric)"
    ),
    level: Optional[str] = typer.Option(
        None, "--level", help="Fitness level (Beginner/Intermediate/Advanced/Expert)"
    ),
    goal: Optional[list[str]] = typer.Option(
        None, "--goal", help="Goal tag, repeatable (replaces existing goals)"
    ),
    units: Optional[str] = typer.Option(None, "--units", "-u", help="imperial or metric"),
) -> None:
    """Create or update the local profile.

    Height and weight are read in the profile's unit preference and stored
    in metric.
    """
    profile = read_profile("profile set", False) or UserProfile(
        unit_preference=load_settings("profile set", False).units.preference
    )

    if units is not None:
        profile.unit_preference = resolve_preference("profile set", units, False)
    preference = profile.unit_preference

    if name is not None:
        profile.full_name = name
    if age is not None:
        profile.age = age
    if height is not None:
        height_cm = parse_height_input(height, preference)
        if height_cm is None:
            fail("profile set", f"Could not parse height: {height!r} ({height_unit(preference)})", False)
        profile.height_cm = height_cm
    if weight is not None:
        weight_kg = parse_weight_input(weight, preference)
        if weight_kg is None:
            fail("profile set", f"Could not parse weight: {weight!r} ({weight_unit(preference)})", False)
        profile.weight_kg = weight_kg
    if level is not None:
        if level not in FITNESS_LEVELS:
            fail("profile set", f"Unknown fitness level: {level}", False,
                 [f"Choose one of: {', '.join(FITNESS_LEVELS)}"])
        profile.fitness_level = level
    if goal:
        profile.goals = list(goal)

    save_profile(profile, load_settings("profile set", False).profile.path)
    console.print("[green]Profile saved[/green]")

    if not profile.is_complete:
        console.print("[yellow]Profile is incomplete; add age, height, weight, "
                      "fitness level and at least one goal[/yellow]")


@profile_app.command("show")
def profile_show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the local profile in its preferred units."""
    json_output = json_output or load_settings("profile show", json_output).defaults.output_format == "json"
    profile = read_profile("profile show", json_output)
    if profile is None:
        fail("profile show", "No profile found", json_output,
             ["Create one with: liftup profile set --age 30 --height \"5' 11\\\"\" "
              "--weight 176 --level Intermediate --goal \"Build Muscle\""])

    preference = profile.unit_preference
    height = format_height(profile.height_cm, preference) if profile.height_cm is not None else None
    weight = format_weight(profile.weight_kg, preference) if profile.weight_kg is not None else None

    if json_output:
        output_json({
            "success": True,
            "command": "profile show",
            "data": {
                **profile_to_dict(profile),
                "height_display": height,
                "weight_display": weight,
                "is_complete": profile.is_complete,
            },
            "human_summary": f"{profile.age or '?'}y, {height or '?'}, {weight or '?'}, "
                             f"{profile.fitness_level or 'no level'}",
        })
        return

    console.print(f"[bold]{profile.full_name or 'User Profile'}[/bold]")
    console.print(f"  Age: {profile.age if profile.age is not None else '-'}")
    console.print(f"  Height: {height or '-'}")
    console.print(f"  Weight: {weight or '-'}")
    console.print(f"  Fitness level: {profile.fitness_level or '-'}")
    console.print(f"  Goals: {', '.join(profile.goals) if profile.goals else '-'}")
    console.print(f"  Units: {preference}")
    if not profile.is_complete:
        console.print("[yellow]Profile is incomplete[/yellow]")


# ============================================================================
# Macro Commands
# ============================================================================


@app.command()
def macros(
    profile_file: Optional[Path] = typer.Option(
        None, "--profile-file", "-f", help="Read profile from this YAML file"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show daily calorie and macro targets for the profile."""
    json_output = json_output or load_settings("macros", json_output).defaults.output_format == "json"
    if profile_file is not None:
        if not profile_file.exists():
            fail("macros", f"Profile file not found: {profile_file}", json_output)
        try:
            profile = load_profile(profile_file)
        except ProfileStoreError as e:
            fail("macros", str(e), json_output)
    else:
        profile = read_profile("macros", json_output)

    if profile is None:
        fail("macros", "No profile found", json_output,
             ["Create one with: liftup profile set"])

    if not is_sufficient_for_macros(profile):
        missing = ", ".join(profile.missing_fields())
        fail("macros", f"Profile is missing: {missing}", json_output,
             ["Update it with: liftup profile set"])

    calc = MacroCalculator(profile)
    result = calc.result()
    logger.debug("BMR %.1f x activity %.3f x goal %.2f",
                 calc.bmr, calc.activity_multiplier, calc.goal_multiplier)

    if json_output:
        output_json({
            "success": True,
            "command": "macros",
            "data": macros_to_dict(result),
            "human_summary": f"{result.daily_calories} kcal: {result.protein}g P, "
                             f"{result.carbs}g C, {result.fats}g F ({result.goal_description})",
        })
        return

    preference = profile.unit_preference
    console.print(Panel(
        f"Based on your profile: {profile.age} years, "
        f"{format_height(profile.height_cm, preference)}, "
        f"{format_weight(profile.weight_kg, preference)}, "
        f"{profile.fitness_level} level",
        title=f"Daily Targets - {result.goal_description}",
    ))

    table = Table(title="Daily Macros")
    table.add_column("Target")
    table.add_column("Amount", justify="right", style="cyan")
    table.add_column("Details", style="dim")
    table.add_row("Calories", f"{result.daily_calories} kcal",
                  f"Your daily calorie target for {result.goal_description.lower()}")
    table.add_row("Protein", f"{result.protein}g",
                  f"{result.protein_percentage}% of daily calories - "
                  f"{result.protein_per_unit} {result.protein_unit}")
    table.add_row("Carbs", f"{result.carbs}g", f"{result.carbs_percentage}% of daily calories")
    table.add_row("Fats", f"{result.fats}g", f"{result.fats_percentage}% of daily calories")
    console.print(table)

    console.print("\n[bold]Recommendations[/bold]")
    console.print(f"  Eat {result.meals_per_day} meals per day")
    console.print(f"  Drink {result.water_intake:.1f} {result.water_unit} of water daily")
    console.print(f"  Include {result.workout_frequency} workouts per week")


@app.command()
def goals() -> None:
    """List the goal tags a profile can use."""
    for tag in AVAILABLE_GOALS:
        console.print(f"  {tag}")


@app.command()
def levels() -> None:
    """List the fitness levels."""
    for level in FITNESS_LEVELS:
        console.print(f"  {level}")


@app.command("config")
def show_config(
    reload: bool = typer.Option(False, "--reload", help="Re-read the config file first"),
) -> None:
    """Show the active configuration."""
    settings = load_settings("config", False, reload=reload)
    console.print(f"Unit preference: {settings.units.preference}")
    console.print(f"Profile file: {settings.profile.path}")
    console.print(f"Output format: {settings.defaults.output_format}")
