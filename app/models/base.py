from sqlalchemy.orm import declarative_base

# 所有模型共用的 Base
Base = declarative_base()
