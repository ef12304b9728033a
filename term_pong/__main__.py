import sys

from term_pong.tui.game_app import main

sys.exit(main())
