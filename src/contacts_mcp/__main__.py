import sys

from contacts_mcp.server.app import main

sys.exit(main())
