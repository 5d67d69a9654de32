import logging

from maui.app import DemoApp
from maui.settings import load_ui_defaults, settings_from_defaults, build_theme_from_defaults
from demo.scenes.list_demo import ListDemoScene

CONFIG_PATH = "demo/config/defaults.yaml"

def main():
    defaults = load_ui_defaults(CONFIG_PATH)
    cfg = settings_from_defaults(defaults)
    logging.basicConfig(level=cfg.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = DemoApp(cfg)
    app.set_scene(ListDemoScene(cfg, build_theme_from_defaults(defaults)))
    app.run()

if __name__ == "__main__":
    main()
