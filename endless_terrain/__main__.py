"""Main entry point for endless_terrain"""

import sys
import traceback
from . import is_compatible
from .main import main
from .terrain import TerrainConfigError

def run_application():
    """Run the terrain scroller with proper error handling."""
    try:
        # Check dependencies first
        if not is_compatible:
            print("Error: System compatibility check failed. Please check the requirements.",
                  file=sys.stderr)
            sys.exit(1)

        print("Initializing endless_terrain...")
        main()

    except KeyboardInterrupt:
        print("\nExiting game... Goodbye!")
        sys.exit(0)

    except TerrainConfigError as e:
        print(f"\nInvalid terrain configuration: {e}", file=sys.stderr)
        sys.exit(2)

    except Exception as e:
        print(f"\nError: {e}", file=sys.stderr)
        print("\nDetailed error information:", file=sys.stderr)
        traceback.print_exc()
        sys.exit(1)

if __name__ == "__main__":
    run_application()
