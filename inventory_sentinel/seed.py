"""Demo records loaded into the default stores (SEED_DEMO_DATA=true)."""
from typing import Dict, List, Optional

from .auth import hash_password

DEMO_PASSWORD = "cambiar123"


def inventory_items() -> List[Dict]:
    return [
        {"id": "ASSET-001", "name": 'Laptop Pro 15"', "type": "Portátil", "status": "Asignado",
         "assigned_to": "Alice Smith (asmith@example.com)", "assigned_to_id": "USR-001",
         "barcode": "123456789012", "serial_number": "SN123XYZ", "purchase_date": "2023-01-15",
         "warranty_end_date": "2026-01-14", "notes": "Pequeño arañazo en la tapa.",
         "nombre_asignado_endpoint": "ALICE-LAPTOP", "windows_version": "11 Pro",
         "bitlocker_activo": True, "office365_instalado": True},
        {"id": "ASSET-002", "name": "Ratón Inalámbrico X", "type": "Ratón", "status": "En Stock",
         "barcode": "987654321098", "serial_number": "SN456ABC", "purchase_date": "2023-05-20",
         "warranty_end_date": "2024-05-19", "notes": ""},
        {"id": "ASSET-003", "name": "Docking Station Z", "type": "Docking Station", "status": "Asignado",
         "assigned_to": "Bob Johnson (bjohnson@example.com)", "assigned_to_id": "USR-002",
         "barcode": "112233445566", "serial_number": "SNDEF789", "purchase_date": "2022-11-01",
         "warranty_end_date": "2024-10-31", "notes": "Requiere adaptador de corriente específico."},
        {"id": "ASSET-004", "name": "Teléfono Móvil S23", "type": "Móvil", "status": "En Stock",
         "barcode": "778899001122", "serial_number": "SNMOB001", "purchase_date": "2024-02-10",
         "warranty_end_date": "2026-02-09", "notes": "Versión desbloqueada."},
        {"id": "ASSET-005", "name": 'Monitor 27" 4K', "type": "Monitor", "status": "Asignado",
         "assigned_to": "Alice Smith (asmith@example.com)", "assigned_to_id": "USR-001",
         "barcode": "334455667788", "serial_number": "SNMON4K01", "purchase_date": "2023-08-05",
         "warranty_end_date": "2026-08-04", "notes": "Incluye cable HDMI."},
        {"id": "ASSET-006", "name": "Keyboard K1", "type": "Teclado", "status": "Asignado",
         "assigned_to": "Diana Prince (dprince@example.com)", "assigned_to_id": "USR-004",
         "barcode": "KB001", "serial_number": "SNKB001", "purchase_date": "2021-06-01",
         "warranty_end_date": "2023-05-31", "notes": ""},
        {"id": "ASSET-007", "name": "Dev Laptop X", "type": "Portátil", "status": "Asignado",
         "assigned_to": "Ethan Hunt (ehunt@example.com)", "assigned_to_id": "USR-005",
         "barcode": "DEVLP01", "serial_number": "SNDEVLP01", "purchase_date": "2020-01-15",
         "warranty_end_date": "2023-01-14", "notes": "For development purposes",
         "nombre_asignado_endpoint": "ETHAN-DEVBOX", "windows_version": "10 Pro",
         "antimalware_instalado": True},
        {"id": "ASSET-008", "name": "Server Rack R1", "type": "Servidor", "status": "Asignado",
         "assigned_to": "Ethan Hunt (ehunt@example.com)", "assigned_to_id": "USR-005",
         "barcode": "SRVR01", "serial_number": "SNSRVR01", "purchase_date": "2020-01-15",
         "warranty_end_date": "2025-01-14", "notes": "Main web server"},
    ]


def licenses() -> List[Dict]:
    return [
        {"id": "LIC-001", "software_name": "Sistema Operativo Pro", "license_key": "A1B2-C3D4-E5F6-G7H8",
         "license_type": "OEM", "seats": 1, "status": "Activa", "purchase_date": "2023-01-15",
         "vendor": "Proveedor OS", "assigned_to": 'ASSET-001 (Laptop Pro 15")',
         "notes": "Licencia vinculada al hardware."},
        {"id": "LIC-002", "software_name": "Suite de Oficina Premium", "license_key": "OFFICE-PREM-XYZ-123",
         "license_type": "Suscripción Anual", "seats": 10, "status": "Activa", "purchase_date": "2024-01-01",
         "expiration_date": "2024-12-31", "vendor": "Suite Software Inc.",
         "assigned_to": "Departamento de Marketing", "notes": "Renovación anual requerida."},
        {"id": "LIC-003", "software_name": "Herramienta de Diseño Gráfico", "license_key": "DESIGNTOOL-ABC-789",
         "license_type": "Perpetua", "seats": 5, "status": "Activa", "purchase_date": "2022-06-20",
         "vendor": "Creative Tools Co.", "assigned_to": "USR-001 (Alice Smith)", "notes": "Versión 2.0"},
        {"id": "LIC-004", "software_name": "Software Antivirus Corporativo", "license_key": "ANTIVIRUS-CORP-456",
         "license_type": "Suscripción Anual", "seats": 50, "status": "Expirada", "purchase_date": "2023-03-01",
         "expiration_date": "2024-02-29", "vendor": "Secure Systems Ltd.",
         "assigned_to": "Toda la organización", "notes": "Necesita renovación urgente."},
        {"id": "LIC-005", "software_name": "IDE de Desarrollo Avanzado", "license_key": "IDE-DEV-PRO-ULTIMATE",
         "license_type": "Suscripción Mensual", "seats": 3, "status": "Sin Asignar",
         "purchase_date": "2024-05-01", "expiration_date": "2024-05-31", "vendor": "DevTools Max",
         "notes": "Licencias flotantes para equipo de desarrollo."},
    ]


def mobile_lines() -> List[Dict]:
    return [
        {"id": "LINE-001", "phone_number": "600112233", "carrier": "Movistar Empresas",
         "plan_name": "Fusión Pro Negocios", "status": "Activa", "sim_card_number": "8934012345678901234F",
         "puk_code": "12345678", "activation_date": "2023-01-10", "assigned_to_user_id": "USR-001",
         "assigned_to_user_name": "Alice Smith", "notes": "Línea principal para Alice."},
        {"id": "LINE-002", "phone_number": "611223344", "carrier": "Vodafone One",
         "plan_name": "Red Empresa Avanzado", "status": "Activa", "sim_card_number": "8934078901234567890A",
         "puk_code": "87654321", "activation_date": "2022-11-05", "assigned_to_user_id": "USR-002",
         "assigned_to_user_name": "Bob Johnson", "notes": "Línea de datos adicional."},
        {"id": "LINE-003", "phone_number": "622334455", "carrier": "Orange Corp",
         "plan_name": "Love Empresa Sin Límites", "status": "Sin Asignar",
         "sim_card_number": "8934056789012345678B", "activation_date": "2024-03-01",
         "notes": "Línea de repuesto disponible."},
        {"id": "LINE-004", "phone_number": "633445566", "carrier": "MásMóvil Pro",
         "plan_name": "Total Conexión", "status": "Suspendida", "sim_card_number": "8934001234567890123C",
         "puk_code": "11223344", "activation_date": "2021-07-15", "assigned_to_user_id": "USR-004",
         "assigned_to_user_name": "Diana Prince", "notes": "Suspendida temporalmente por viaje largo."},
    ]


def orders() -> List[Dict]:
    return [
        {"id": "ORD-001", "order_date": "2024-05-01", "supplier": "TechSupplier Inc.", "status": "En Tránsito",
         "expected_arrival_date": "2024-05-15", "tracking_number": "TRK123456789",
         "notes": "Pedido urgente para el nuevo departamento.",
         "items": [
             {"id": "ITEM-001-1", "item_name": "Laptop Avanzada X1", "quantity": 5, "category": "Portátil",
              "model": "X1 Carbon Gen 12", "characteristics": "16GB RAM, 512GB SSD, Intel i7"},
             {"id": "ITEM-001-2", "item_name": 'Monitor Curvo 32"', "quantity": 2, "category": "Monitor",
              "model": "Samsung Odyssey G7", "characteristics": "1440p, 240Hz"},
         ]},
        {"id": "ORD-002", "order_date": "2024-04-20", "supplier": "OfficeGadgets Ltd.", "status": "Recibido",
         "expected_arrival_date": "2024-05-05", "actual_arrival_date": "2024-05-03",
         "tracking_number": "TRK987654321", "notes": "Material para mejorar ergonomía de puestos.",
         "items": [
             {"id": "ITEM-002-1", "item_name": "Teclado Mecánico Ergonómico", "quantity": 10,
              "category": "Teclado", "model": "Keychron K2 Pro", "characteristics": "Retroiluminado, Switch Marrón"},
             {"id": "ITEM-002-2", "item_name": "Ratón Vertical Inalámbrico", "quantity": 10,
              "category": "Ratón", "model": "Logitech MX Vertical", "characteristics": "Recargable"},
         ]},
        {"id": "ORD-003", "order_date": "2024-05-10", "supplier": "Componentes PC Global", "status": "Solicitado",
         "expected_arrival_date": "2024-06-01", "notes": "Confirmar stock antes de procesar pago.",
         "items": [
             {"id": "ITEM-003-1", "item_name": "Tarjeta Gráfica RTX 4070", "quantity": 3, "category": "Otro",
              "model": "NVIDIA RTX 4070 Founders", "characteristics": "Para equipos de diseño"},
         ]},
    ]


def entregas() -> List[Dict]:
    return [
        {"id": "ENT-001", "user_id": "USR-001", "user_name": "Alice Smith", "delivery_date": "2024-05-10",
         "status": "Completada", "notes": "Usuario recogió el material en la oficina de IT.",
         "items": [
             {"id": "DI-001-1", "inventory_item_id": "ASSET-001", "item_name": 'Laptop Pro 15"', "quantity": 1,
              "serial_number": "SN123XYZ", "notes": "Entregado con cargador y funda."},
             {"id": "DI-001-2", "inventory_item_id": "ASSET-005", "item_name": 'Monitor 27" 4K', "quantity": 1,
              "serial_number": "SNMON4K01", "notes": "Cable HDMI incluido."},
         ]},
        {"id": "ENT-002", "user_id": "USR-002", "user_name": "Bob Johnson", "delivery_date": "2024-05-15",
         "status": "Pendiente", "notes": "Preparar para envío a la sucursal norte.",
         "items": [
             {"id": "DI-002-1", "item_name": "Nuevo Teclado Ergonómico", "quantity": 1,
              "notes": "Modelo específico solicitado."},
             {"id": "DI-002-2", "item_name": "Ratón Inalámbrico", "quantity": 1},
         ]},
        {"id": "ENT-003", "user_id": "USR-004", "user_name": "Diana Prince", "delivery_date": "2024-04-20",
         "status": "Completada", "notes": "Entrega estándar de equipamiento.",
         "items": [
             {"id": "DI-003-1", "inventory_item_id": "ASSET-006", "item_name": "Keyboard K1", "quantity": 1,
              "serial_number": "SNKB001"},
         ]},
    ]


def users(bcrypt_rounds: Optional[int] = None) -> List[Dict]:
    demo_hash = hash_password(DEMO_PASSWORD, bcrypt_rounds)
    rows = [
        {"id": "USR-001", "name": "Alice Smith", "email": "asmith@example.com", "department": "Ingeniería",
         "phone": "123-456-7890", "join_date": "2022-03-01", "role": "Tecnico"},
        {"id": "USR-002", "name": "Bob Johnson", "email": "bjohnson@example.com", "department": "Marketing",
         "phone": "987-654-3210", "join_date": "2021-08-15", "role": "Usuario"},
        {"id": "USR-003", "name": "Charlie Brown", "email": "cbrown@example.com", "department": "Ventas",
         "phone": "555-123-4567", "join_date": "2023-01-10", "role": "Usuario"},
        {"id": "USR-004", "name": "Diana Prince", "email": "dprince@example.com", "department": "RRHH",
         "phone": "111-222-3333", "join_date": "2020-05-20", "role": "Usuario"},
        {"id": "USR-005", "name": "Ethan Hunt", "email": "ehunt@example.com", "department": "IT",
         "phone": "777-888-9999", "join_date": "2019-11-11", "role": "Tecnico",
         "cuenta_ad_creada": True, "cuenta_o365_creada": True, "licencia_o365_asignada": True},
    ]
    for row in rows:
        row["password_hash"] = demo_hash
    rows.append({"id": "USR-006", "name": "Admin", "email": "admin@admin.com", "department": "IT",
                 "role": "Administrador", "password_hash": hash_password("admin", bcrypt_rounds)})
    return rows
