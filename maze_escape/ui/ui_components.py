import pygame
from typing import Callable, Optional, Tuple
from maze_escape.core.constants import COLORS

class Button:
    def __init__(self, x: int, y: int, width: int, height: int,
                 text: str, font: pygame.font.Font,
                 action: Optional[Callable] = None,
                 bg_color: Tuple = COLORS.UI_BG,
                 hover_color: Tuple = COLORS.UI_HOVER,
                 text_color: Tuple = COLORS.UI_TEXT):
        self.rect = pygame.Rect(x, y, width, height)
        self.text = text
        self.font = font
        self.action = action
        self.bg_color = bg_color
        self.hover_color = hover_color
        self.text_color = text_color

        self.is_hovered = False
        self.is_pressed = False

        # Pre-render text
        self.text_surf = self.font.render(self.text, True, self.text_color)
        self.text_rect = self.text_surf.get_rect(center=self.rect.center)

    def update(self, mouse_pos, mouse_click) -> bool:
        """Update state. Returns True if clicked."""
        self.is_hovered = self.rect.collidepoint(mouse_pos)

        clicked = False
        if self.is_hovered and mouse_click:
            self.is_pressed = True
        elif not mouse_click and self.is_pressed:
            if self.is_hovered:
                # Click released inside
                clicked = True
                if self.action:
                    self.action()
            self.is_pressed = False

        return clicked

    def draw(self, surface: pygame.Surface):
        color = self.hover_color if self.is_hovered else self.bg_color

        pygame.draw.rect(surface, color, self.rect, border_radius=6)
        pygame.draw.rect(surface, COLORS.UI_BORDER, self.rect, 2, border_radius=6)

        surface.blit(self.text_surf, self.text_rect)
