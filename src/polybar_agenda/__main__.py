import sys

from polybar_agenda.scripts.show_agenda import main

sys.exit(main())
