WIDTH = 640
HEIGHT = 400
FULLSCREEN = False
CAPTION = "Pong"
FPS = 60
VSYNC = True
# Scheduler ticks per rendered frame. A zero-delay interval fires several
# times per display refresh, so run the recurring tasks more than once.
TICKS_PER_FRAME = 4
LOG_LEVEL = "INFO"
LOG_FILE = None
# Paddle and ball geometry (stage units)
PADDLE_WIDTH = 10
PADDLE_HEIGHT = 40
# Vertical span of a paddle that returns the ball. Shorter than the paddle.
PADDLE_HIT_SPAN = 30
BALL_SIZE = 10
BALL_SPEED = 2
# Colors
BACKGROUND_COLOR = "#000000"
FOREGROUND_COLOR = "#FFFFFF"
# Key codes understood by the view
KEY_UP = 38
KEY_DOWN = 40
