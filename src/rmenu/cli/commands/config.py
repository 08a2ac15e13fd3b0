"""Config command handler: show or reset launcher settings."""

from argparse import Namespace

from rmenu.cli.commands.base import BaseCommandHandler
from rmenu.config import AppConfig, ColorsConfig
from rmenu.constants import EXIT_FAILURE, EXIT_SUCCESS


class ConfigHandler(BaseCommandHandler):
    """Handler for the config command."""

    def execute(self, args: Namespace) -> int:
        store = self.settings_store
        colors_path, app_path = store.config_paths()

        if args.reset:
            saved = store.save_app_config(AppConfig())
            saved = store.save_colors_config(ColorsConfig()) and saved
            if not saved:
                print("Failed to write default settings")
                return EXIT_FAILURE
            print("Default settings written")

        app_config = store.load_app_config()
        colors = store.load_colors_config()

        print(f"App settings:    {app_path}")
        print(f"  position:      {app_config.position}")
        print(f"  font_name:     {app_config.font_name}")
        print(f"Color settings:  {colors_path}")
        print(f"  background:    {colors.background}")
        print(f"  text:          {colors.text}")
        print(f"  highlight:     {colors.highlight}")
        print(f"  font_size:     {colors.font_size}")
        return EXIT_SUCCESS
