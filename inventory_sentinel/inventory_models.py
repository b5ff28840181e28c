from typing import Optional, List
from enum import Enum
from datetime import date
from sqlmodel import SQLModel, Field


# -------------------------
# Enums (closed value sets used by the records and the forms)
# -------------------------
class InventoryItemType(str, Enum):
    PORTATIL = "Portátil"
    SOBREMESA = "Sobremesa"
    MONITOR = "Monitor"
    MOVIL = "Móvil"
    TABLET = "Tablet"
    TECLADO = "Teclado"
    RATON = "Ratón"
    DOCKING_STATION = "Docking Station"
    IMPRESORA = "Impresora"
    SERVIDOR = "Servidor"
    REDES = "Redes"
    ALMACENAMIENTO = "Almacenamiento"
    OTRO = "Otro"

class InventoryItemStatus(str, Enum):
    EN_STOCK = "En Stock"
    ASIGNADO = "Asignado"
    MANTENIMIENTO = "Mantenimiento"
    RETIRADO = "Retirado"

class LicenseType(str, Enum):
    PERPETUA = "Perpetua"
    SUSCRIPCION_ANUAL = "Suscripción Anual"
    SUSCRIPCION_MENSUAL = "Suscripción Mensual"
    OEM = "OEM"
    FREEWARE = "Freeware"
    SHAREWARE = "Shareware"
    OTRO = "Otro"

class LicenseStatus(str, Enum):
    ACTIVA = "Activa"
    EXPIRADA = "Expirada"
    SIN_ASIGNAR = "Sin Asignar"
    ARCHIVADA = "Archivada"

class MobileLineStatus(str, Enum):
    ACTIVA = "Activa"
    SUSPENDIDA = "Suspendida"
    CANCELADA = "Cancelada"
    SIN_ASIGNAR = "Sin Asignar"

class OrderStatus(str, Enum):
    SOLICITADO = "Solicitado"
    COMPRADO = "Comprado"
    EN_TRANSITO = "En Tránsito"
    RECIBIDO = "Recibido"
    CANCELADO = "Cancelado"

class EntregaStatus(str, Enum):
    PENDIENTE = "Pendiente"
    EN_PROCESO = "En Proceso"
    COMPLETADA = "Completada"
    CANCELADA = "Cancelada"

class UserRole(str, Enum):
    ADMINISTRADOR = "Administrador"
    TECNICO = "Tecnico"
    USUARIO = "Usuario"


# -------------------------
# Inventory
# -------------------------
class EndpointProvisioning(SQLModel):
    """
    Provisioning checklist carried by every inventory item.
    Mostly relevant for Portátil/Sobremesa (endpoint fields) and Móvil (mobile fields).
    """
    usuario_admin_local_establecido: Optional[str] = None
    marca_modelo_endpoint: Optional[str] = None
    codigo_bitlocker_en_repositorio: Optional[bool] = False
    mac_wifi_endpoint: Optional[str] = None
    mac_ethernet_endpoint: Optional[str] = None
    marca_modelo_cargador_endpoint: Optional[str] = None
    nombre_asignado_endpoint: Optional[str] = None  # hostname
    endpoint_en_dominio: Optional[bool] = False
    homepage_factorial_navegadores: Optional[bool] = False
    bitlocker_activo: Optional[bool] = False
    teamviewer_corporativo_instalado: Optional[bool] = False
    teamviewer_en_endpoint: Optional[bool] = False
    id_teamviewer_endpoint: Optional[str] = None
    seven_zip_instalado: Optional[bool] = False
    antimalware_instalado: Optional[bool] = False
    adobe_acrobat_reader_instalado: Optional[bool] = False
    forticlient_vpn_instalado: Optional[bool] = False
    office365_instalado: Optional[bool] = False
    acceso_office365_correcto: Optional[bool] = False
    onedrive_instalado: Optional[bool] = False
    deshabilitar_onedrive_backup_escritorio: Optional[bool] = False
    teams_instalado: Optional[bool] = False
    restauracion_sistema_activo: Optional[bool] = False
    bginfo_instalado_configurado: Optional[bool] = False
    google_earth_pro_instalado: Optional[bool] = False
    softphone_en_endpoint: Optional[bool] = False
    qgis_instalado: Optional[bool] = False
    pdf24_instalado: Optional[bool] = False
    idioma_windows_establecido: Optional[str] = "Español"
    firefox_chrome_instalado: Optional[bool] = False
    status_actividad_endpoint: Optional[str] = "Active"
    visor_dwg_instalado: Optional[bool] = False
    windows_version: Optional[str] = None
    software_instalado_adicional: Optional[str] = None
    fichero_plataformado_entregado: Optional[bool] = False

    # printer configuration on the endpoint
    numero_planta_impresora: Optional[str] = None
    driver_impresora_instalado: Optional[bool] = False
    codigo_usuario_impresora: Optional[str] = None
    impresora_configurada: Optional[bool] = False

    # mobile devices
    imeis_movil: Optional[str] = None
    marca_modelo_movil: Optional[str] = None
    direccion_mac_wifi_movil: Optional[str] = None
    estado_terminal_movil: Optional[str] = None  # Nuevo, Usado - Buen estado, ...
    numero_serie_movil: Optional[str] = None
    outlook_desplegado_movil: Optional[bool] = False
    teams_desplegado_movil: Optional[bool] = False
    harmony_mobile_instalado: Optional[bool] = False
    prueba_llamadas_movil: Optional[bool] = False
    teamviewer_en_movil: Optional[bool] = False
    id_teamviewer_movil: Optional[str] = None

class InventoryItemBase(EndpointProvisioning):
    name: str
    type: InventoryItemType
    status: InventoryItemStatus
    barcode: str
    serial_number: Optional[str] = None
    purchase_date: Optional[date] = None
    warranty_end_date: Optional[date] = None
    notes: Optional[str] = None
    assigned_to: Optional[str] = None  # display string "Name (email)"
    assigned_to_id: Optional[str] = None  # User.id

class InventoryItem(InventoryItemBase):
    id: str


# -------------------------
# Licenses
# -------------------------
class LicenseBase(SQLModel):
    software_name: str
    license_key: str
    license_type: LicenseType
    seats: int = 1
    status: LicenseStatus = LicenseStatus.SIN_ASIGNAR
    purchase_date: Optional[date] = None
    expiration_date: Optional[date] = None  # subscriptions only
    vendor: Optional[str] = None
    assigned_to: Optional[str] = None  # user, device or department, free text
    notes: Optional[str] = None

class License(LicenseBase):
    id: str


# -------------------------
# Mobile lines
# -------------------------
class MobileLineBase(SQLModel):
    phone_number: str
    carrier: str
    plan_name: str
    status: MobileLineStatus
    sim_card_number: Optional[str] = None  # ICCID
    puk_code: Optional[str] = None
    activation_date: Optional[date] = None
    assigned_to_user_id: Optional[str] = None
    assigned_to_user_name: Optional[str] = None  # denormalized from User.name
    notes: Optional[str] = None

class MobileLine(MobileLineBase):
    id: str


# -------------------------
# Orders (pedidos)
# -------------------------
class OrderItemBase(SQLModel):
    item_name: str
    quantity: int = 1
    category: InventoryItemType
    model: Optional[str] = None
    characteristics: Optional[str] = None

class OrderItem(OrderItemBase):
    id: str

class OrderBase(SQLModel):
    order_date: date
    supplier: str
    status: OrderStatus
    expected_arrival_date: Optional[date] = None
    actual_arrival_date: Optional[date] = None
    tracking_number: Optional[str] = None
    notes: Optional[str] = None

class Order(OrderBase):
    id: str
    items: List[OrderItem] = Field(default_factory=list)


# -------------------------
# Deliveries (entregas)
# -------------------------
class EntregaDetalleItemBase(SQLModel):
    inventory_item_id: Optional[str] = None  # asset tag when the line is a tracked item
    item_name: str
    quantity: int = 1
    serial_number: Optional[str] = None
    notes: Optional[str] = None

class EntregaDetalleItem(EntregaDetalleItemBase):
    id: str

class EntregaBase(SQLModel):
    user_id: str
    delivery_date: date
    status: EntregaStatus
    notes: Optional[str] = None

class Entrega(EntregaBase):
    id: str
    user_name: str
    items: List[EntregaDetalleItem] = Field(default_factory=list)


# -------------------------
# Users
# -------------------------
class UserProvisioning(SQLModel):
    """Onboarding checklist filled in by IT when a user joins."""
    # accounts
    cuenta_ad_creada: Optional[bool] = False
    usuario_ad: Optional[str] = None
    grupos_ad_asignados: Optional[str] = None
    cuenta_o365_creada: Optional[bool] = False
    licencia_o365_asignada: Optional[bool] = False
    buzon_compartido_asignado: Optional[bool] = False
    mfa_configurado: Optional[bool] = False
    acceso_vpn_concedido: Optional[bool] = False
    acceso_erp_concedido: Optional[bool] = False
    carpetas_red_asignadas: Optional[str] = None
    firma_correo_configurada: Optional[bool] = False
    alta_factorial: Optional[bool] = False

    # endpoint
    tipo_endpoint: Optional[str] = None
    marca_modelo_endpoint: Optional[str] = None
    numero_serie_endpoint: Optional[str] = None
    nombre_equipo: Optional[str] = None
    sistema_operativo: Optional[str] = None
    mac_wifi_endpoint: Optional[str] = None
    mac_ethernet_endpoint: Optional[str] = None
    endpoint_inventory_id: Optional[str] = None

    # printers and peripherals (InventoryItem ids)
    impresora_id: Optional[str] = None
    codigo_usuario_impresora: Optional[str] = None
    monitor_id: Optional[str] = None
    teclado_id: Optional[str] = None
    raton_id: Optional[str] = None
    docking_station_id: Optional[str] = None
    auriculares_id: Optional[str] = None

    # mobile device
    movil_requerido: Optional[bool] = False
    movil_inventory_id: Optional[str] = None
    linea_movil_id: Optional[str] = None
    movil_enrolado_mdm: Optional[bool] = False
    outlook_configurado_movil: Optional[bool] = False
    teams_configurado_movil: Optional[bool] = False
    authenticator_configurado_movil: Optional[bool] = False

    comentario: Optional[str] = None

class UserBase(UserProvisioning):
    name: str
    email: str
    department: str
    phone: Optional[str] = None
    join_date: Optional[date] = None
    role: UserRole = UserRole.USUARIO

class User(UserBase):
    id: str
    assigned_items: int = 0  # recomputed from the inventory on read
    password_hash: Optional[str] = None

class UserRead(UserBase):
    """User as returned by the API: no password hash."""
    id: str
    assigned_items: int = 0

class SessionUser(SQLModel):
    id: str
    email: str
    name: str
    role: UserRole
