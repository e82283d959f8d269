"""PDF rendering of diet plans."""

import logging
from dataclasses import dataclass
from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.pdfgen.canvas import Canvas
from reportlab.platypus import (
    HRFlowable,
    KeepTogether,
    PageBreak,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)
from reportlab.platypus.flowables import Flowable

from diet_planner.domain.foods import MealType
from diet_planner.domain.plans import DietPlan, MealInstance
from diet_planner.domain.profiles import UserProfile
from diet_planner.errors import RenderingError
from diet_planner.services.metabolism import compute_bmi

_PRIMARY = colors.HexColor("#2e7d32")
_MUTED = colors.HexColor("#607d8b")
_HEADER_BG = colors.HexColor("#e8f5e9")
_TRACKER_ROWS = 12
_NOTE_LINES = 10

_logger = logging.getLogger(__name__)


def _label(value: str) -> str:
    return value.replace("_", " ").title()


def _fmt(value: float, digits: int = 0) -> str:
    return f"{value:.{digits}f}"


@dataclass
class DietPlanPdfRenderer:
    """Lays out a diet plan as a printable document."""

    brand_name: str = "Diet Planner"
    support_email: str = "support@dietplanner.local"

    def __post_init__(self) -> None:
        self.styles = getSampleStyleSheet()
        self.styles.add(
            ParagraphStyle(
                name="PlanCover",
                parent=self.styles["Title"],
                fontSize=28,
                leading=34,
                textColor=_PRIMARY,
                spaceAfter=18,
            )
        )
        self.styles.add(
            ParagraphStyle(
                name="PlanSection",
                parent=self.styles["Heading1"],
                textColor=_PRIMARY,
                spaceAfter=8,
            )
        )
        self.styles.add(
            ParagraphStyle(
                name="PlanHeading",
                parent=self.styles["Heading3"],
                textColor=colors.HexColor("#2c3e50"),
                spaceBefore=10,
                spaceAfter=4,
            )
        )
        self.styles.add(
            ParagraphStyle(
                name="PlanSmall",
                parent=self.styles["BodyText"],
                fontSize=8,
                leading=10,
                textColor=colors.grey,
            )
        )

    def render(self, plan: DietPlan, profile: UserProfile) -> bytes:
        """Render a plan to PDF bytes, built entirely in memory."""
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=2 * cm,
            leftMargin=2 * cm,
            topMargin=2 * cm,
            bottomMargin=2.5 * cm,
            title=plan.name,
            author=self.brand_name,
        )
        try:
            story: list[Flowable] = []
            story.extend(self._cover(plan, profile))
            story.append(PageBreak())
            story.extend(self._profile_summary(profile))
            story.append(PageBreak())
            story.extend(self._nutrition_summary(plan))
            story.append(PageBreak())
            story.extend(self._weekly_plan(plan))
            story.append(PageBreak())
            story.extend(self._shopping_list(plan))
            story.append(PageBreak())
            story.extend(self._recipes(plan))
            story.append(PageBreak())
            story.extend(self._progress_tracking())
            doc.build(story, onFirstPage=self._footer, onLaterPages=self._footer)
        except Exception as exc:
            _logger.exception("Failed to render plan PDF", extra={"plan_id": plan.id})
            raise RenderingError(f"Could not render plan {plan.id}") from exc
        finally:
            content = buffer.getvalue()
            buffer.close()
        return content

    def _footer(self, canvas: Canvas, doc: SimpleDocTemplate) -> None:
        canvas.saveState()
        width, _ = doc.pagesize
        canvas.setStrokeColor(colors.lightgrey)
        canvas.line(2 * cm, 1.8 * cm, width - 2 * cm, 1.8 * cm)
        canvas.setFont("Helvetica", 8)
        canvas.setFillColor(colors.grey)
        canvas.drawString(2 * cm, 1.3 * cm, self.brand_name.upper())
        canvas.drawCentredString(width / 2, 1.3 * cm, f"Page {doc.page}")
        canvas.drawRightString(
            width - 2 * cm, 1.3 * cm, f"For support: {self.support_email}"
        )
        canvas.restoreState()

    def _section(self, title: str) -> list[Flowable]:
        return [
            Paragraph(escape(title), self.styles["PlanSection"]),
            HRFlowable(width="100%", thickness=1, color=_PRIMARY),
            Spacer(1, 10),
        ]

    def _table(
        self,
        data: list[list[str]],
        col_widths: list[float],
        *,
        header: bool = True,
        grid: bool = True,
    ) -> Table:
        table = Table(data, colWidths=col_widths, repeatRows=1 if header else 0)
        style = [
            ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
            ("FONTSIZE", (0, 0), (-1, -1), 9),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 5),
            ("TOPPADDING", (0, 0), (-1, -1), 5),
        ]
        if header:
            style += [
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("BACKGROUND", (0, 0), (-1, 0), _HEADER_BG),
            ]
        else:
            style.append(("TEXTCOLOR", (0, 0), (0, -1), _MUTED))
        if grid:
            style.append(("GRID", (0, 0), (-1, -1), 0.5, colors.grey))
        table.setStyle(TableStyle(style))
        return table

    def _cover(self, plan: DietPlan, profile: UserProfile) -> list[Flowable]:
        elements: list[Flowable] = [
            Spacer(1, 3 * cm),
            Paragraph(escape(self.brand_name.upper()), self.styles["PlanCover"]),
            Paragraph(escape(plan.name), self.styles["Title"]),
            Paragraph("Personalized Nutrition Plan", self.styles["Heading2"]),
            Spacer(1, 1.5 * cm),
        ]
        rows = [
            ["Prepared for", profile.full_name or "Valued Client"],
            ["Generated", plan.created_at.strftime("%Y-%m-%d")],
            ["Primary goal", _label(plan.goal.value)],
            ["Daily calories", f"{plan.targets.daily_calories} kcal"],
        ]
        if profile.email:
            rows.insert(1, ["Email", profile.email])
        elements.append(
            self._table(rows, [5 * cm, 10 * cm], header=False, grid=False)
        )
        elements += [
            Spacer(1, 2 * cm),
            Paragraph(
                "This plan is personalized based on your individual needs and "
                "preferences. Please consult with a healthcare professional "
                "before starting any new diet program.",
                self.styles["PlanSmall"],
            ),
        ]
        return elements

    def _profile_summary(self, profile: UserProfile) -> list[Flowable]:
        bmi = compute_bmi(profile)
        allergies = ", ".join(sorted(_label(a.value) for a in profile.allergies))
        rows = [
            ["Age", f"{profile.age} years"],
            ["Sex", _label(profile.sex.value)],
            ["Weight", f"{_fmt(profile.weight_kg, 1)} kg"],
            ["Height", f"{_fmt(profile.height_cm, 1)} cm"],
            ["BMI", f"{bmi.value} ({bmi.category})"],
            ["Activity level", _label(profile.activity_level.value)],
            ["Primary goal", _label(profile.goal.value)],
            ["Diet type", _label(profile.diet_type.value)],
            ["Allergies", allergies or "None"],
        ]
        return [
            *self._section("Profile Summary"),
            self._table(rows, [5 * cm, 12 * cm], header=False),
        ]

    def _nutrition_summary(self, plan: DietPlan) -> list[Flowable]:
        targets = plan.targets
        average = plan.daily_average
        target_rows = [
            ["Measure", "Value"],
            ["Basal metabolic rate (BMR)", f"{targets.bmr} kcal"],
            ["Total daily energy expenditure", f"{targets.tdee} kcal"],
            ["Daily calorie target", f"{targets.daily_calories} kcal"],
            ["Protein", f"{targets.macros.protein_g} g"],
            ["Carbohydrates", f"{targets.macros.carbs_g} g"],
            ["Fats", f"{targets.macros.fats_g} g"],
        ]
        split_rows = [
            ["Protein", "Carbohydrates", "Fats"],
            [
                f"{targets.ratios.protein_pct}%",
                f"{targets.ratios.carbs_pct}%",
                f"{targets.ratios.fats_pct}%",
            ],
        ]
        average_rows = [
            ["Nutrient", "Average per day"],
            ["Calories", f"{_fmt(average.calories)} kcal"],
            ["Protein", f"{_fmt(average.protein_g)} g"],
            ["Carbohydrates", f"{_fmt(average.carbs_g)} g"],
            ["Fats", f"{_fmt(average.fats_g)} g"],
            ["Fiber", f"{_fmt(average.fiber_g)} g"],
            ["Sodium", f"{_fmt(average.sodium_mg)} mg"],
        ]
        return [
            *self._section("Nutrition Summary"),
            Paragraph("Daily Targets", self.styles["PlanHeading"]),
            self._table(target_rows, [9 * cm, 6 * cm]),
            Paragraph("Macronutrient Distribution", self.styles["PlanHeading"]),
            self._table(split_rows, [5 * cm, 5 * cm, 5 * cm]),
            Paragraph("Weekly Averages", self.styles["PlanHeading"]),
            self._table(average_rows, [9 * cm, 6 * cm]),
        ]

    def _weekly_plan(self, plan: DietPlan) -> list[Flowable]:
        elements = self._section("Weekly Meal Plan")
        for day in plan.days:
            rows = [["Meal", "Foods", "kcal"]]
            for meal_type in MealType:
                meal = day.meals[meal_type]
                foods = ", ".join(
                    f"{item.name} ({_fmt(item.quantity)}{item.unit})"
                    for item in meal.items
                )
                rows.append(
                    [
                        _label(meal_type.value),
                        Paragraph(escape(foods or meal.name), self.styles["BodyText"]),
                        _fmt(meal.totals.calories),
                    ]
                )
            rows.append(["Total", "", _fmt(day.totals.calories)])
            table = self._table(rows, [3 * cm, 11 * cm, 2 * cm])
            table.setStyle(
                TableStyle([("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold")])
            )
            elements.append(
                KeepTogether(
                    [
                        Paragraph(escape(_label(day.day)), self.styles["PlanHeading"]),
                        table,
                    ]
                )
            )
        return elements

    def _shopping_list(self, plan: DietPlan) -> list[Flowable]:
        elements = self._section("Shopping List")
        grouped = plan.shopping_list.by_category()
        if not grouped:
            elements.append(
                Paragraph(
                    "Shopping list will be generated based on your meal selections.",
                    self.styles["BodyText"],
                )
            )
            return elements
        for category, entries in grouped.items():
            rows = [
                ["[  ]", entry.name, f"{_fmt(entry.quantity)} {entry.unit}"]
                for entry in entries
            ]
            heading = Paragraph(escape(_label(category)), self.styles["PlanHeading"])
            elements.append(heading)
            elements.append(
                self._table(rows, [1 * cm, 10 * cm, 5 * cm], header=False, grid=False)
            )
        return elements

    def _recipes(self, plan: DietPlan) -> list[Flowable]:
        elements = self._section("Recipe Instructions")
        seen: set[str] = set()
        recipes: list[MealInstance] = []
        for meal in plan.meals():
            if meal.is_empty or meal.name in seen:
                continue
            seen.add(meal.name)
            recipes.append(meal)
        if not recipes:
            elements.append(
                Paragraph(
                    "No recipes available for this plan.", self.styles["BodyText"]
                )
            )
        for meal in recipes:
            block: list[Flowable] = [
                Paragraph(escape(meal.name), self.styles["PlanHeading"]),
                Paragraph(
                    f"Prep time: {meal.prep_minutes} min &nbsp;&nbsp; "
                    f"Cook time: {meal.cook_minutes} min &nbsp;&nbsp; "
                    f"Calories: {_fmt(meal.totals.calories)} kcal",
                    self.styles["PlanSmall"],
                ),
                Paragraph("<b>Ingredients</b>", self.styles["BodyText"]),
            ]
            block += [
                Paragraph(
                    escape(f"• {_fmt(item.quantity)}{item.unit} {item.name}"),
                    self.styles["BodyText"],
                )
                for item in meal.items
            ]
            block.append(Paragraph("<b>Instructions</b>", self.styles["BodyText"]))
            block += [
                Paragraph(escape(f"{index}. {step}"), self.styles["BodyText"])
                for index, step in enumerate(meal.instructions, start=1)
            ]
            elements.append(KeepTogether(block))
        return elements

    def _progress_tracking(self) -> list[Flowable]:
        weight_rows = [["Date", "Weight (kg)", "Body fat %", "Notes"]]
        weight_rows += [[""] * 4 for _ in range(_TRACKER_ROWS)]
        measure_rows = [["Date", "Chest (cm)", "Waist (cm)", "Hips (cm)", "Arms (cm)"]]
        measure_rows += [[""] * 5 for _ in range(_TRACKER_ROWS)]
        note_rows = [[""] for _ in range(_NOTE_LINES)]
        notes = Table(
            note_rows, colWidths=[17 * cm], rowHeights=[0.8 * cm] * _NOTE_LINES
        )
        notes.setStyle(
            TableStyle([("LINEBELOW", (0, 0), (-1, -1), 0.5, colors.lightgrey)])
        )
        return [
            *self._section("Progress Tracking"),
            Paragraph("Weight Progress Tracker", self.styles["PlanHeading"]),
            self._table(weight_rows, [3.5 * cm, 3.5 * cm, 3.5 * cm, 6.5 * cm]),
            Paragraph("Body Measurements Tracker", self.styles["PlanHeading"]),
            self._table(measure_rows, [3.4 * cm] * 5),
            PageBreak(),
            Paragraph("Progress Notes", self.styles["PlanHeading"]),
            Paragraph(
                "Use this space to record how you feel, energy levels, "
                "challenges, and victories:",
                self.styles["BodyText"],
            ),
            notes,
        ]
