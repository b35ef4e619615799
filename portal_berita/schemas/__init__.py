from .user import (
	RegisterRequest,
	RegisterResponse,
	LoginRequest,
	LoginResponse,
	UserResponse,
	UserUpdate,
	PenulisSummary,
	MessageResponse,
)
from .kategori import (
	KategoriBase,
	KategoriCreate,
	KategoriUpdate,
	KategoriResponse,
)
from .berita import (
	BeritaResponse,
	BeritaDetailResponse,
	BeritaSummary,
	BeritaSearchResponse,
)
from .engagement import (
	DisukaiCreate,
	DisukaiUpdate,
	DisukaiResponse,
	TidakDisukaiCreate,
	TidakDisukaiUpdate,
	TidakDisukaiResponse,
	HistoryCreate,
	HistoryResponse,
	BookmarkCreate,
	BookmarkResponse,
)
from .notification import (
	NotificationResponse,
	NotificationListResponse,
)
from .report import (
	ReportCreate,
	ReportStatusUpdate,
	ReportResponse,
	ReportDetailResponse,
	ReportEnvelope,
	ReportListResponse,
)
from .membership import (
	TransactionRequest,
	TransactionResponse,
	UpgradeRequest,
	UpgradeResponse,
)
from .analytics import (
	DashboardResponse,
	UserAnalyticsResponse,
	ContentAnalyticsResponse,
)
