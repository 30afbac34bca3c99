# studiogen/layout/planner.py
"""
PathPlanner: turns a base directory into a ProjectLayout.
Pure string construction. Never touches the filesystem, never raises.
"""
from __future__ import annotations

from studiogen.core import constants as c
from studiogen.layout.models import ProjectLayout
from studiogen.utils.paths import join_base


def plan_layout(base: str = "", package: str = "", is_app: bool = False) -> ProjectLayout:
    return ProjectLayout(
        libs=join_base(base, c.LIBS_DIR),
        src=join_base(base, c.SRC_DIR),
        test=join_base(base, c.TEST_DIR),
        assets=join_base(base, c.ASSETS_DIR),
        jni_libs=join_base(base, c.JNI_LIBS_DIR),
        res=join_base(base, c.RES_DIR),
        manifest=join_base(base, c.MANIFEST_FILE),
        gradle_build=join_base(base, c.GRADLE_BUILD_FILE),
        gradle_settings=join_base(base, c.GRADLE_SETTINGS_FILE),
        proguard=join_base(base, c.PROGUARD_FILE),
        package=package,
        is_app=is_app,
    )
