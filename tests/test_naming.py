import pytest

from codebehind.core.naming import map_type_name
from codebehind.models import GenerationConfig


@pytest.fixture
def config():
    return GenerationConfig()


@pytest.mark.parametrize("tag, expected", [
    ("NSString", "MonoTouch.Foundation.NSString"),
    ("NSObject", "MonoTouch.Foundation.NSObject"),
    ("IBUILabel", "MonoTouch.UIKit.UILabel"),
    ("IBUIButton", "MonoTouch.UIKit.UIButton"),
    ("IBMKMapView", "MonoTouch.MapKit.MKMapView"),
])
def test_known_prefixes(config, tag, expected):
    assert map_type_name(tag, config) == expected


@pytest.mark.parametrize("tag", [
    "IB",
    "IBProxyObject",
    "IBCocoaTouchFramework",
    "UIButton",
    "MyCustomThing",
    "",
])
def test_fallback_to_foundation_object(config, tag):
    assert map_type_name(tag, config) == "MonoTouch.Foundation.NSObject"


def test_namespaces_come_from_config():
    config = GenerationConfig(
        foundation_namespace="Foundation",
        uikit_namespace="UIKit",
        mapkit_namespace="MapKit",
    )
    assert map_type_name("IBUISwitch", config) == "UIKit.UISwitch"
    assert map_type_name("IBMKAnnotationView", config) == "MapKit.MKAnnotationView"
    assert map_type_name("NSDate", config) == "Foundation.NSDate"
    assert map_type_name("Widget", config) == "Foundation.NSObject"
