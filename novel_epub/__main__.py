import sys

from novel_epub.tool import main

sys.exit(main())
