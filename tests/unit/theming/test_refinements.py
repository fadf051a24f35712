"""Tests for category schemas and the refinement registry."""

from __future__ import annotations

from shadekit.core.theming.refinements import (
    CATEGORY_SCHEMAS,
    CategorySchema,
    RefinementRegistry,
    assign_existing,
    build_default_registry,
    refine_pricing,
    role_fields,
    schema_refinement,
)
from shadekit.core.theming.roles import BlockCategory, ThemeRole


class TestAssignExisting:
    """Test the no-new-keys assignment rule."""

    def test_only_existing_keys_are_set(self, red_shades):
        """Absent fields stay absent."""
        target = {"titleColor": "#000000"}
        assign_existing(target, {"titleColor": 900, "accentColor": 600}, red_shades)
        assert target == {"titleColor": red_shades[900]}


class TestCategorySchemas:
    """Test the declared schemas."""

    def test_every_category_has_a_schema(self):
        """All categories are covered."""
        assert set(CATEGORY_SCHEMAS) == set(BlockCategory)

    def test_special_price_uses_dark_background(self):
        """Special price sections sit on the darkest step."""
        assert CATEGORY_SCHEMAS[BlockCategory.SPECIAL_PRICE].fields["backgroundColor"] == 950


class TestSchemaRefinement:
    """Test schema-driven refinement."""

    def test_top_level_fields(self, red_shades):
        """Declared top-level fields are recolored."""
        refine = schema_refinement(CATEGORY_SCHEMAS[BlockCategory.HERO])
        content = refine({"textColor": "#FFFFFF", "taglineColor": "#FFFFFF"}, red_shades)
        assert content["textColor"] == red_shades[900]
        assert content["taglineColor"] == red_shades[700]
        assert "buttonColor" not in content

    def test_collection_items(self, red_shades):
        """Mapping items of a collection get item colors; other items are kept."""
        refine = schema_refinement(CATEGORY_SCHEMAS[BlockCategory.FAQ])
        content = refine(
            {"faqs": [{"question": "Q", "questionColor": "#000"}, "plain", {"answer": "A"}]},
            red_shades,
        )
        faqs = content["faqs"]
        assert faqs[0] == {"question": "Q", "questionColor": red_shades[700]}
        assert faqs[1] == "plain"
        assert faqs[2] == {"answer": "A"}

    def test_non_list_collection_untouched(self, red_shades):
        """A collection key holding a non-list is left alone."""
        refine = schema_refinement(CATEGORY_SCHEMAS[BlockCategory.STATS])
        content = refine({"stats": "n/a"}, red_shades)
        assert content["stats"] == "n/a"

    def test_testimonial_stars(self, red_shades):
        """Star colors are set at block and item level."""
        refine = schema_refinement(CATEGORY_SCHEMAS[BlockCategory.TESTIMONIAL])
        content = refine(
            {"starColor": "#000", "testimonials": [{"starColor": "#000", "nameColor": "#000"}]},
            red_shades,
        )
        assert content["starColor"] == red_shades[400]
        assert content["testimonials"][0] == {
            "starColor": red_shades[400],
            "nameColor": red_shades[900],
        }


class TestRefinePricing:
    """Test pricing plan refinement."""

    def test_highlighted_and_regular_plans(self, red_shades, pricing_block):
        """Highlighted plans get a strong fill; regular plans a pale card."""
        content = refine_pricing(pricing_block.content_copy(), red_shades)
        pro, basic = content["plans"]

        assert pro["backgroundColor"] == red_shades[600]
        assert pro["textColor"] == red_shades[50]
        assert pro["buttonColor"] == red_shades[500]
        assert pro["borderColor"] == red_shades[200]
        assert pro["priceColor"] == red_shades[500]

        assert basic["backgroundColor"] == red_shades[100]
        assert basic["textColor"] == red_shades[900]
        assert basic["buttonColor"] == red_shades[600]
        assert "borderColor" not in basic
        assert "priceColor" not in basic

    def test_block_level_fields(self, red_shades, pricing_block):
        """Block-level fields follow the pricing schema."""
        content = refine_pricing(pricing_block.content_copy(), red_shades)
        assert content["backgroundColor"] == red_shades[50]
        assert content["textColor"] == red_shades[900]


class TestRefinementRegistry:
    """Test registry lookup and replacement."""

    def test_default_registry_covers_all_categories(self):
        """Every category gets a refinement; pricing uses the plan-aware one."""
        registry = build_default_registry()
        assert len(registry) == len(BlockCategory)
        assert set(registry.categories) == set(BlockCategory)
        assert registry.get(BlockCategory.PRICING) is refine_pricing

    def test_unknown_category_passes_through(self, red_shades):
        """No category (or no registered refinement) leaves content alone."""
        registry = RefinementRegistry()
        content = {"titleColor": "#000"}
        assert registry.refine(None, content, red_shades) is content
        assert registry.refine(BlockCategory.HERO, content, red_shades) is content

    def test_register_replaces(self, red_shades):
        """A later registration replaces the earlier one."""
        registry = build_default_registry()

        def mark(content, shades):
            content["marked"] = True
            return content

        registry.register(BlockCategory.HERO, mark)
        assert registry.refine(BlockCategory.HERO, {}, red_shades) == {"marked": True}

    def test_roles_default_to_every_role(self):
        """Categories registered without roles get the full role table."""
        registry = build_default_registry()
        assert registry.roles_for(None) == frozenset(ThemeRole)
        assert registry.roles_for(BlockCategory.HERO) == frozenset(ThemeRole)

    def test_register_with_roles(self, red_shades):
        """Roles given at registration narrow the generic pass."""
        registry = RefinementRegistry()
        registry.register(BlockCategory.STATS, lambda content, shades: content, [ThemeRole.BORDER])
        assert registry.roles_for(BlockCategory.STATS) == frozenset({ThemeRole.BORDER})
        registry.register(BlockCategory.STATS, lambda content, shades: content)
        assert registry.roles_for(BlockCategory.STATS) == frozenset(ThemeRole)


class TestRoleFields:
    """Test role → content key mapping."""

    def test_maps_roles_to_steps(self):
        """Each role maps to its content key and step."""
        assert role_fields([ThemeRole.ACCENT, ThemeRole.OVERLAY]) == {
            "accentColor": 600,
            "overlayColor": 950,
        }

    def test_schema_defaults_to_all_roles(self):
        """Built-in schemas support every generic role."""
        schema = CATEGORY_SCHEMAS[BlockCategory.CTA]
        assert schema.roles == frozenset(ThemeRole)
        assert len(schema.generic_fields()) == len(ThemeRole)

    def test_schema_with_limited_roles(self):
        """A narrowed schema only exposes its own roles."""
        schema = CategorySchema(category=BlockCategory.STATS, roles=frozenset({ThemeRole.TEXT}))
        assert schema.generic_fields() == {"textColor": 800}
