import sys
from pathlib import Path

from dotenv import load_dotenv

# 添加项目根目录到 PATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
sys.path.insert(0, str(project_root / 'src'))

# 加载环境配置
load_dotenv(project_root / '.env.test', interpolate=False)

# 导入所有 fixtures
from tests.fixtures.env import clean_email_sender_env, options_env_setter
from tests.fixtures.file import settings_file_factory

__all__ = [
	'clean_email_sender_env',
	'options_env_setter',
	'settings_file_factory',
]
