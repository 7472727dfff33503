APP_ORG = "ZapLink"
APP_NAME = "ZapQR Export"
