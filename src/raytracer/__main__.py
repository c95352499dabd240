import sys
from raytracer.main import main

sys.exit(main())
