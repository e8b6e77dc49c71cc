import sys

from icon_cropper.cli import main

sys.exit(main())
