BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GREY = (120, 120, 120)
DARK_GREY = (40, 40, 40)
RED = (220, 50, 47)
GREEN = (63, 185, 80)
YELLOW = (230, 190, 40)
BLUE = (59, 130, 246)
