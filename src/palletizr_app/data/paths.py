import os

DATA_DIR = os.path.join(os.path.dirname(__file__))


def pallets_xml_path() -> str:
    return os.path.join(DATA_DIR, "pallets.xml")


def containers_xml_path() -> str:
    return os.path.join(DATA_DIR, "containers.xml")


def scoring_yaml_path() -> str:
    return os.path.join(DATA_DIR, "scoring.yaml")
