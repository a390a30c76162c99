"""Animation library setup."""

from __future__ import annotations

from create_stack.config import Animation
from create_stack.core.context import ExecutionContext
from create_stack.core.generator import Generator
from create_stack.setup.helpers import classified, install

ANIMATION_PACKAGES: dict[Animation, str] = {
    Animation.MOTION: "motion",
    Animation.GSAP: "gsap",
    Animation.LENIS: "lenis",
    Animation.AUTO_ANIMATE: "@formkit/auto-animate",
    Animation.ANIMEJS: "animejs",
}


class AnimationGenerator(Generator):
    """Installs every selected animation library in one runtime install."""

    name = "animation"
    description = "Add animation libraries"
    reads = frozenset({"animation"})

    def should_run(self, context: ExecutionContext) -> bool:
        return bool(context.config.animation)

    async def execute(self, context: ExecutionContext) -> None:
        packages = [ANIMATION_PACKAGES[a] for a in Animation if a in context.config.animation]
        with context.reporter.task(
            "Adding animation libraries...",
            success="Animation libraries added",
            failure="Failed to install animation libraries",
        ), classified(
            context,
            packages=packages,
            install_message="Failed to install animation libraries",
            file_message="Failed to install animation libraries",
        ):
            await install(context, *packages)
