"""
Catalog of business types, product categories, tags and industries used to
classify suppliers and to build request search criteria.

Category, tag and industry identifiers are the values stored in the user and
request documents, so they keep the store's (Spanish) vocabulary.
"""
from typing import Dict, List, Optional

from supplier_matching.models import ANY_BUSINESS_TYPE, SUPPLIER_ROLE

BUSINESS_TYPES = [
    {"value": "manufacturer", "label": "Direct manufacturer", "description": "Produces the goods it sells"},
    {"value": "distributor", "label": "Distributor / reseller", "description": "Resells third-party products"},
    {"value": "service", "label": "Service provider", "description": "Offers technical or logistics services"},
    {"value": "mixed", "label": "Mixed", "description": "Combines products and services"},
]

PRODUCT_CATEGORIES = [
    {"value": "materia_prima", "label": "Materia Prima", "description": "Materiales base para manufactura"},
    {"value": "componentes", "label": "Componentes y Partes", "description": "Piezas y partes para ensamble"},
    {"value": "productos_terminados", "label": "Productos Terminados", "description": "Productos listos para uso final"},
    {"value": "insumos", "label": "Insumos y Consumibles", "description": "Materiales de uso continuo"},
    {"value": "servicios", "label": "Servicios", "description": "Servicios técnicos y especializados"},
]

PRODUCT_TAGS: Dict[str, List[str]] = {
    "materia_prima": [
        "Acero", "Acero Inoxidable", "Aluminio", "Cobre", "Bronce", "Latón",
        "Plástico", "PVC", "Polietileno", "Polipropileno", "Madera", "Vidrio",
        "Caucho", "Silicona", "Resinas", "Fibra de Vidrio",
    ],
    "componentes": [
        "Tornillos", "Pernos", "Tuercas", "Arandelas", "Remaches", "Rodamientos",
        "Cojinetes", "Motores Eléctricos", "Motores Hidráulicos", "Válvulas",
        "Bombas", "Sensores", "Actuadores", "Cables Eléctricos", "Conectores",
        "Interruptores", "Relés", "Transformadores", "Resistencias",
        "Capacitores", "Diodos", "Transistores",
    ],
    "productos_terminados": [
        "Electrodomésticos", "Maquinaria Industrial", "Herramientas Manuales",
        "Herramientas Eléctricas", "Equipos de Medición", "Equipos de Seguridad",
        "Mobiliario", "Iluminación",
    ],
    "insumos": [
        "Pintura Industrial", "Recubrimientos", "Adhesivos", "Selladores",
        "Lubricantes", "Aceites", "Grasas", "Limpiadores", "Disolventes",
        "Empaques", "Etiquetas", "Cajas y Embalajes",
        "EPP (Equipo de Protección Personal)", "Uniformes", "Guantes", "Mascarillas",
    ],
    "servicios": [
        "Mecanizado CNC", "Torneado", "Fresado", "Soldadura", "Soldadura TIG",
        "Soldadura MIG", "Soldadura por Arco", "Pintura Industrial",
        "Powder Coating", "Galvanizado", "Cromado", "Anodizado",
        "Tratamiento Térmico", "Temple", "Revenido", "Corte por Láser",
        "Corte por Plasma", "Corte por Agua", "Doblado de Metal", "Estampado",
        "Fundición", "Inyección de Plástico", "Extrusión", "Transporte",
        "Logística", "Almacenamiento", "Distribución", "Mantenimiento Preventivo",
        "Mantenimiento Correctivo", "Instalación", "Calibración", "Certificación",
        "Consultoría Técnica", "Diseño de Producto", "Ingeniería",
    ],
}

INDUSTRIES = [
    {"value": "metalmecanica", "label": "Metalmecánica"},
    {"value": "automotriz", "label": "Automotriz"},
    {"value": "construccion", "label": "Construcción"},
    {"value": "electrica", "label": "Eléctrica"},
    {"value": "electronica", "label": "Electrónica"},
    {"value": "alimenticia", "label": "Alimenticia"},
    {"value": "farmaceutica", "label": "Farmacéutica"},
    {"value": "textil", "label": "Textil"},
    {"value": "quimica", "label": "Química"},
    {"value": "petroleo_gas", "label": "Petróleo y Gas"},
    {"value": "mineria", "label": "Minería"},
    {"value": "energia", "label": "Energía"},
    {"value": "telecomunicaciones", "label": "Telecomunicaciones"},
    {"value": "manufactura", "label": "Manufactura General"},
    {"value": "otra", "label": "Otra"},
]

# Values as written by the mobile app into the document store
STORED_BUSINESS_TYPES = {
    "fabricante": "manufacturer",
    "distribuidor": "distributor",
    "servicio": "service",
    "mixto": "mixed",
    "cualquiera": ANY_BUSINESS_TYPE,
}
STORED_ROLES = {
    "proveedor": SUPPLIER_ROLE,
}


def tags_for_category(category: str) -> List[str]:
    """Catalog tags offered for a category; empty for unknown categories."""
    return list(PRODUCT_TAGS.get(category, []))


def all_categories() -> List[str]:
    return [c["value"] for c in PRODUCT_CATEGORIES]


def _label(options: List[Dict[str, str]], value: str) -> str:
    for option in options:
        if option["value"] == value:
            return option["label"]
    return value


def category_label(value: str) -> str:
    return _label(PRODUCT_CATEGORIES, value)


def business_type_label(value: str) -> str:
    return _label(BUSINESS_TYPES, value)


def industry_label(value: str) -> str:
    return _label(INDUSTRIES, value)


def normalize_business_type(value: Optional[str]) -> Optional[str]:
    """
    Map a stored business type ("fabricante", "cualquiera", ...) to the
    engine's vocabulary. Blank values become None; unknown values are
    lower-cased and passed through.
    """
    if value is None:
        return None
    text = str(value).strip().lower()
    if not text:
        return None
    return STORED_BUSINESS_TYPES.get(text, text)


def normalize_role(value: Optional[str]) -> Optional[str]:
    """Map a stored user role ("proveedor", ...) to the engine's vocabulary."""
    if value is None:
        return None
    text = str(value).strip().lower()
    return STORED_ROLES.get(text, text)
