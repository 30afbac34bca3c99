# studiogen/emit/templates.py
"""
Fixed template text for the generated files, and placeholder substitution.

Placeholders use the {{.Name}} form. Substitution is a single pass with no
control flow; every placeholder must have a value in the supplied mapping.
"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

from studiogen.core.exceptions import TemplateRenderError

RAW_MANIFEST = """<?xml version="1.0" ?>
<manifest xmlns:android="http://schemas.android.com/apk/res/android"
          package="{{.Pkg}}">
    <application android:allowBackup="true"
        >

    </application>
</manifest>
"""

RAW_GRADLE_BUILD = """
apply plugin: '{{.Plugin}}'

android{
\tcompileSdkVersion 22
\tbuildToolsVersion '22.0.1'

\tdefaultConfig{
\t\tminSdkVersion 8
\t\ttargetSdkVersion 22
\t\tversionCode 1
\t\tversionName '1.0'
\t}

\tbuildTypes{
\t\tdebug{
\t\t\tminifyEnabled false
\t\t\tproguardFiles getDefaultProguardFile('proguard-android.txt'), 'proguard-rules.pro'
\t\t}
\t}

}

dependencies{
\tcompile 'com.android.support:support-v4:22.2.0'
}

"""

RAW_PROGUARD = """# Add project specific ProGuard rules here.
# By default, the flags in this file are appended to flags specified
# in /home/zhou/opt/android-sdk/tools/proguard/proguard-android.txt
# You can edit the include path and order by changing the proguardFiles
# directive in build.gradle.
#
# For more details, see
#   http://developer.android.com/guide/developing/tools/proguard.html

# Add any project specific keep options here:

# If your project uses WebView with JS, uncomment the following
# and specify the fully qualified class name to the JavaScript interface
# class:
#-keepclassmembers class fqcn.of.javascript.interface.for.webview {
#   public *;
#}
"""

# Loaded once, read-only
TEMPLATES: Mapping[str, str] = MappingProxyType({
    "manifest": RAW_MANIFEST,
    "build_gradle": RAW_GRADLE_BUILD,
})

_PLACEHOLDER_RE = re.compile(r"\{\{\s*\.([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")


def placeholders(template_text: str) -> list[str]:
    """Placeholder names in order of first appearance."""
    seen: list[str] = []
    for name in _PLACEHOLDER_RE.findall(template_text):
        if name not in seen:
            seen.append(name)
    return seen


def substitute(template_text: str, variables: Mapping[str, str], name: str = "template") -> str:
    """
    Replace every {{.Name}} with str(variables[Name]).
    Values are inserted verbatim (no escaping).

    Raises:
        TemplateRenderError: a placeholder has no value in variables.
    """
    missing = [p for p in placeholders(template_text) if p not in variables]
    if missing:
        raise TemplateRenderError(name, missing[0])
    return _PLACEHOLDER_RE.sub(lambda m: str(variables[m.group(1)]), template_text)
