# main.py
import numpy as np
import pygame
from sphere_tracer.renderer.raytracer import Renderer
from sphere_tracer.renderer.tone_mapping import gamma_quantize
from sphere_tracer.scenes import SCENES

class Application:
    """
    Minimal display shell: renders one image into a pygame window, row by
    row, then waits until the window is closed or ESC is pressed.
    """
    quality_levels = {
        "preview": {"antialias": False, "max_depth": 2, "scale": 0.5},
        "final": {"antialias": True, "max_depth": 6, "scale": 1.0},
    }

    def __init__(self, width: int = 1280, height: int = 720, fov: float = 45.0,
                 quality: str = "final", scene: str = "default"):
        if quality not in self.quality_levels:
            raise ValueError(f"Unknown quality {quality!r}, expected one of {list(self.quality_levels)}")
        if scene not in SCENES:
            raise ValueError(f"Unknown scene {scene!r}, expected one of {list(SCENES)}")
        self.window_width = width
        self.window_height = height
        self.current_quality = quality
        settings = self.quality_levels[quality]
        self.render_width = max(1, int(width * settings["scale"]))
        self.render_height = max(1, int(height * settings["scale"]))
        self.screen = None

        self.renderer = Renderer(
            self.render_width,
            self.render_height,
            fov,
            max_depth=settings["max_depth"],
            antialias=settings["antialias"]
        )
        self.world = SCENES[scene]()
        self.image = np.zeros((self.render_height, self.render_width, 3), dtype=np.float64)

    def present(self, frame: np.ndarray):
        """Blits an 8-bit (height, width, 3) frame, upscaling to the window."""
        # surfarray indexes pixels as [x, y]
        surface = pygame.surfarray.make_surface(frame.swapaxes(0, 1))
        if self.render_width != self.window_width or self.render_height != self.window_height:
            surface = pygame.transform.scale(surface, (self.window_width, self.window_height))
        self.screen.blit(surface, (0, 0))
        pygame.display.flip()

    def quit_requested(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return True
            if event.type == pygame.KEYUP and event.key == pygame.K_ESCAPE:
                return True
        return False

    def open_window(self):
        pygame.init()
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("Sphere Tracer")

    def run(self):
        try:
            self.open_window()
            print("\n=== Initializing Renderer ===")
            print(f"Render resolution: {self.render_width}x{self.render_height}")
            print(f"Quality settings: {self.current_quality}")
            self.renderer.describe_scene(self.world)
            refresh_every = max(1, self.render_height // 20)
            for y, row in self.renderer.render_rows(self.world):
                self.image[y] = row
                if (y + 1) % refresh_every == 0 or y + 1 == self.render_height:
                    self.present(gamma_quantize(self.image))
                    if self.quit_requested():
                        print("Render abandoned")
                        return
            print("Render complete")
            clock = pygame.time.Clock()
            while not self.quit_requested():
                clock.tick(30)
        finally:
            print("Cleaning up...")
            pygame.quit()

def main():
    Application().run()

if __name__ == "__main__":
    main()
