"""Resource paths and timing constants shared by the game."""

LOG_FILEPATH = "../log.txt"

SPLASHSTATE_BACKGROUND_PATH = "../../resources/background_splash.png"
SPLASHSTATE_SHOWTIME = 3.0

MAINMENU_BACKGROUND_PATH = "../../resources/background_splash.png"
MAINMENU_TITLE_PATH = "../../resources/background_splash.png"
MAINMENU_PLAYBUTTON_PATH = "../../resources/background_splash.png"

GAMESTATE_BACKGROUND_PATH = "../../resources/background_splash.png"

PLAYER_TEXTURE_PATH = "../../resources/player.png"
BODY_MALE_TEXTURE_PATH = "../../resources/BODY_male.png"