# tests/unit/emit/test_templates.py
import unittest

from studiogen.core.exceptions import TemplateRenderError
from studiogen.emit.templates import (
    RAW_GRADLE_BUILD,
    RAW_MANIFEST,
    RAW_PROGUARD,
    TEMPLATES,
    placeholders,
    substitute,
)


class TestSubstitute(unittest.TestCase):

    def test_manifest_package_attribute(self):
        out = substitute(RAW_MANIFEST, {"Pkg": "com.example.app"})
        self.assertIn('package="com.example.app"', out)
        self.assertNotIn("{{", out)

    def test_blank_package_gives_empty_attribute(self):
        out = substitute(RAW_MANIFEST, {"Pkg": ""})
        self.assertIn('package=""', out)

    def test_gradle_plugins(self):
        app = substitute(RAW_GRADLE_BUILD, {"Plugin": "com.android.application"})
        lib = substitute(RAW_GRADLE_BUILD, {"Plugin": "com.android.library"})
        self.assertIn("apply plugin: 'com.android.application'", app)
        self.assertIn("apply plugin: 'com.android.library'", lib)

    def test_missing_variable_raises(self):
        with self.assertRaises(TemplateRenderError) as ctx:
            substitute(RAW_MANIFEST, {}, name="manifest")
        self.assertEqual(ctx.exception.template_name, "manifest")
        self.assertEqual(ctx.exception.variable, "Pkg")

    def test_values_inserted_verbatim(self):
        out = substitute('a="{{.V}}"', {"V": '<&">'})
        self.assertEqual(out, 'a="<&">"')

    def test_whitespace_inside_braces(self):
        self.assertEqual(substitute("x{{ .Name }}y", {"Name": "-"}), "x-y")

    def test_single_pass(self):
        out = substitute("{{.A}}", {"A": "{{.B}}", "B": "nope"})
        self.assertEqual(out, "{{.B}}")

    def test_non_dotted_braces_left_alone(self):
        self.assertEqual(substitute("{{Name}}", {}), "{{Name}}")

    def test_extra_variables_ignored(self):
        self.assertEqual(substitute("{{.A}}", {"A": "1", "B": "2"}), "1")


class TestTemplateText(unittest.TestCase):

    def test_placeholders(self):
        self.assertEqual(placeholders(RAW_MANIFEST), ["Pkg"])
        self.assertEqual(placeholders(RAW_GRADLE_BUILD), ["Plugin"])
        self.assertEqual(placeholders(RAW_PROGUARD), [])

    def test_template_mapping_is_read_only(self):
        self.assertIs(TEMPLATES["manifest"], RAW_MANIFEST)
        with self.assertRaises(TypeError):
            TEMPLATES["manifest"] = "changed"

    def test_gradle_uses_tabs(self):
        self.assertTrue(RAW_GRADLE_BUILD.startswith("\napply plugin:"))
        self.assertIn("\tcompileSdkVersion 22\n", RAW_GRADLE_BUILD)

    def test_proguard_boilerplate(self):
        self.assertTrue(RAW_PROGUARD.startswith("# Add project specific ProGuard rules here.\n"))
        self.assertTrue(RAW_PROGUARD.endswith("#}\n"))


if __name__ == "__main__":
    unittest.main()
