# Code generated by scripts/generate_countries.py. DO NOT EDIT.
#
# Merged from the ISO-3166 regional codes dataset and the GeoNames country info
# dataset. Regenerate with: python scripts/generate_countries.py
# Project: https://github.com/iso-countries/iso-countries
from __future__ import annotations

from countries.models import Country

# ISO-3166-1 alpha-2 codes
ALPHA2_AF = "AF"
ALPHA2_AX = "AX"
ALPHA2_AL = "AL"
ALPHA2_DZ = "DZ"
ALPHA2_AS = "AS"
ALPHA2_AD = "AD"
ALPHA2_AO = "AO"
ALPHA2_AI = "AI"
ALPHA2_AQ = "AQ"
ALPHA2_AG = "AG"
ALPHA2_AR = "AR"
ALPHA2_AM = "AM"
ALPHA2_AW = "AW"
ALPHA2_AU = "AU"
ALPHA2_AT = "AT"
ALPHA2_AZ = "AZ"
ALPHA2_BS = "BS"
ALPHA2_BH = "BH"
ALPHA2_BD = "BD"
ALPHA2_BB = "BB"
ALPHA2_BY = "BY"
ALPHA2_BE = "BE"
ALPHA2_BZ = "BZ"
ALPHA2_BJ = "BJ"
ALPHA2_BM = "BM"
ALPHA2_BT = "BT"
ALPHA2_BO = "BO"
ALPHA2_BQ = "BQ"
ALPHA2_BA = "BA"
ALPHA2_BW = "BW"
ALPHA2_BV = "BV"
ALPHA2_BR = "BR"
ALPHA2_IO = "IO"
ALPHA2_BN = "BN"
ALPHA2_BG = "BG"
ALPHA2_BF = "BF"
ALPHA2_BI = "BI"
ALPHA2_CV = "CV"
ALPHA2_KH = "KH"
ALPHA2_CM = "CM"
ALPHA2_CA = "CA"
ALPHA2_KY = "KY"
ALPHA2_CF = "CF"
ALPHA2_TD = "TD"
ALPHA2_CL = "CL"
ALPHA2_CN = "CN"
ALPHA2_CX = "CX"
ALPHA2_CC = "CC"
ALPHA2_CO = "CO"
ALPHA2_KM = "KM"
ALPHA2_CG = "CG"
ALPHA2_CD = "CD"
ALPHA2_CK = "CK"
ALPHA2_CR = "CR"
ALPHA2_CI = "CI"
ALPHA2_HR = "HR"
ALPHA2_CU = "CU"
ALPHA2_CW = "CW"
ALPHA2_CY = "CY"
ALPHA2_CZ = "CZ"
ALPHA2_DK = "DK"
ALPHA2_DJ = "DJ"
ALPHA2_DM = "DM"
ALPHA2_DO = "DO"
ALPHA2_EC = "EC"
ALPHA2_EG = "EG"
ALPHA2_SV = "SV"
ALPHA2_GQ = "GQ"
ALPHA2_ER = "ER"
ALPHA2_EE = "EE"
ALPHA2_SZ = "SZ"
ALPHA2_ET = "ET"
ALPHA2_FK = "FK"
ALPHA2_FO = "FO"
ALPHA2_FJ = "FJ"
ALPHA2_FI = "FI"
ALPHA2_FR = "FR"
ALPHA2_GF = "GF"
ALPHA2_PF = "PF"
ALPHA2_TF = "TF"
ALPHA2_GA = "GA"
ALPHA2_GM = "GM"
ALPHA2_GE = "GE"
ALPHA2_DE = "DE"
ALPHA2_GH = "GH"
ALPHA2_GI = "GI"
ALPHA2_GR = "GR"
ALPHA2_GL = "GL"
ALPHA2_GD = "GD"
ALPHA2_GP = "GP"
ALPHA2_GU = "GU"
ALPHA2_GT = "GT"
ALPHA2_GG = "GG"
ALPHA2_GN = "GN"
ALPHA2_GW = "GW"
ALPHA2_GY = "GY"
ALPHA2_HT = "HT"
ALPHA2_HM = "HM"
ALPHA2_VA = "VA"
ALPHA2_HN = "HN"
ALPHA2_HK = "HK"
ALPHA2_HU = "HU"
ALPHA2_IS = "IS"
ALPHA2_IN = "IN"
ALPHA2_ID = "ID"
ALPHA2_IR = "IR"
ALPHA2_IQ = "IQ"
ALPHA2_IE = "IE"
ALPHA2_IM = "IM"
ALPHA2_IL = "IL"
ALPHA2_IT = "IT"
ALPHA2_JM = "JM"
ALPHA2_JP = "JP"
ALPHA2_JE = "JE"
ALPHA2_JO = "JO"
ALPHA2_KZ = "KZ"
ALPHA2_KE = "KE"
ALPHA2_KI = "KI"
ALPHA2_KP = "KP"
ALPHA2_KR = "KR"
ALPHA2_KW = "KW"
ALPHA2_KG = "KG"
ALPHA2_LA = "LA"
ALPHA2_LV = "LV"
ALPHA2_LB = "LB"
ALPHA2_LS = "LS"
ALPHA2_LR = "LR"
ALPHA2_LY = "LY"
ALPHA2_LI = "LI"
ALPHA2_LT = "LT"
ALPHA2_LU = "LU"
ALPHA2_MO = "MO"
ALPHA2_MG = "MG"
ALPHA2_MW = "MW"
ALPHA2_MY = "MY"
ALPHA2_MV = "MV"
ALPHA2_ML = "ML"
ALPHA2_MT = "MT"
ALPHA2_MH = "MH"
ALPHA2_MQ = "MQ"
ALPHA2_MR = "MR"
ALPHA2_MU = "MU"
ALPHA2_YT = "YT"
ALPHA2_MX = "MX"
ALPHA2_FM = "FM"
ALPHA2_MD = "MD"
ALPHA2_MC = "MC"
ALPHA2_MN = "MN"
ALPHA2_ME = "ME"
ALPHA2_MS = "MS"
ALPHA2_MA = "MA"
ALPHA2_MZ = "MZ"
ALPHA2_MM = "MM"
ALPHA2_NA = "NA"
ALPHA2_NR = "NR"
ALPHA2_NP = "NP"
ALPHA2_NL = "NL"
ALPHA2_NC = "NC"
ALPHA2_NZ = "NZ"
ALPHA2_NI = "NI"
ALPHA2_NE = "NE"
ALPHA2_NG = "NG"
ALPHA2_NU = "NU"
ALPHA2_NF = "NF"
ALPHA2_MK = "MK"
ALPHA2_MP = "MP"
ALPHA2_NO = "NO"
ALPHA2_OM = "OM"
ALPHA2_PK = "PK"
ALPHA2_PW = "PW"
ALPHA2_PS = "PS"
ALPHA2_PA = "PA"
ALPHA2_PG = "PG"
ALPHA2_PY = "PY"
ALPHA2_PE = "PE"
ALPHA2_PH = "PH"
ALPHA2_PN = "PN"
ALPHA2_PL = "PL"
ALPHA2_PT = "PT"
ALPHA2_PR = "PR"
ALPHA2_QA = "QA"
ALPHA2_RE = "RE"
ALPHA2_RO = "RO"
ALPHA2_RU = "RU"
ALPHA2_RW = "RW"
ALPHA2_BL = "BL"
ALPHA2_SH = "SH"
ALPHA2_KN = "KN"
ALPHA2_LC = "LC"
ALPHA2_MF = "MF"
ALPHA2_PM = "PM"
ALPHA2_VC = "VC"
ALPHA2_WS = "WS"
ALPHA2_SM = "SM"
ALPHA2_ST = "ST"
ALPHA2_SA = "SA"
ALPHA2_SN = "SN"
ALPHA2_RS = "RS"
ALPHA2_SC = "SC"
ALPHA2_SL = "SL"
ALPHA2_SG = "SG"
ALPHA2_SX = "SX"
ALPHA2_SK = "SK"
ALPHA2_SI = "SI"
ALPHA2_SB = "SB"
ALPHA2_SO = "SO"
ALPHA2_ZA = "ZA"
ALPHA2_GS = "GS"
ALPHA2_SS = "SS"
ALPHA2_ES = "ES"
ALPHA2_LK = "LK"
ALPHA2_SD = "SD"
ALPHA2_SR = "SR"
ALPHA2_SJ = "SJ"
ALPHA2_SE = "SE"
ALPHA2_CH = "CH"
ALPHA2_SY = "SY"
ALPHA2_TW = "TW"
ALPHA2_TJ = "TJ"
ALPHA2_TZ = "TZ"
ALPHA2_TH = "TH"
ALPHA2_TL = "TL"
ALPHA2_TG = "TG"
ALPHA2_TK = "TK"
ALPHA2_TO = "TO"
ALPHA2_TT = "TT"
ALPHA2_TN = "TN"
ALPHA2_TR = "TR"
ALPHA2_TM = "TM"
ALPHA2_TC = "TC"
ALPHA2_TV = "TV"
ALPHA2_UG = "UG"
ALPHA2_UA = "UA"
ALPHA2_AE = "AE"
ALPHA2_GB = "GB"
ALPHA2_US = "US"
ALPHA2_UM = "UM"
ALPHA2_UY = "UY"
ALPHA2_UZ = "UZ"
ALPHA2_VU = "VU"
ALPHA2_VE = "VE"
ALPHA2_VN = "VN"
ALPHA2_VG = "VG"
ALPHA2_VI = "VI"
ALPHA2_WF = "WF"
ALPHA2_EH = "EH"
ALPHA2_YE = "YE"
ALPHA2_ZM = "ZM"
ALPHA2_ZW = "ZW"

# ISO-3166-1 alpha-3 codes
ALPHA3_AFG = "AFG"
ALPHA3_ALA = "ALA"
ALPHA3_ALB = "ALB"
ALPHA3_DZA = "DZA"
ALPHA3_ASM = "ASM"
ALPHA3_AND = "AND"
ALPHA3_AGO = "AGO"
ALPHA3_AIA = "AIA"
ALPHA3_ATA = "ATA"
ALPHA3_ATG = "ATG"
ALPHA3_ARG = "ARG"
ALPHA3_ARM = "ARM"
ALPHA3_ABW = "ABW"
ALPHA3_AUS = "AUS"
ALPHA3_AUT = "AUT"
ALPHA3_AZE = "AZE"
ALPHA3_BHS = "BHS"
ALPHA3_BHR = "BHR"
ALPHA3_BGD = "BGD"
ALPHA3_BRB = "BRB"
ALPHA3_BLR = "BLR"
ALPHA3_BEL = "BEL"
ALPHA3_BLZ = "BLZ"
ALPHA3_BEN = "BEN"
ALPHA3_BMU = "BMU"
ALPHA3_BTN = "BTN"
ALPHA3_BOL = "BOL"
ALPHA3_BES = "BES"
ALPHA3_BIH = "BIH"
ALPHA3_BWA = "BWA"
ALPHA3_BVT = "BVT"
ALPHA3_BRA = "BRA"
ALPHA3_IOT = "IOT"
ALPHA3_BRN = "BRN"
ALPHA3_BGR = "BGR"
ALPHA3_BFA = "BFA"
ALPHA3_BDI = "BDI"
ALPHA3_CPV = "CPV"
ALPHA3_KHM = "KHM"
ALPHA3_CMR = "CMR"
ALPHA3_CAN = "CAN"
ALPHA3_CYM = "CYM"
ALPHA3_CAF = "CAF"
ALPHA3_TCD = "TCD"
ALPHA3_CHL = "CHL"
ALPHA3_CHN = "CHN"
ALPHA3_CXR = "CXR"
ALPHA3_CCK = "CCK"
ALPHA3_COL = "COL"
ALPHA3_COM = "COM"
ALPHA3_COG = "COG"
ALPHA3_COD = "COD"
ALPHA3_COK = "COK"
ALPHA3_CRI = "CRI"
ALPHA3_CIV = "CIV"
ALPHA3_HRV = "HRV"
ALPHA3_CUB = "CUB"
ALPHA3_CUW = "CUW"
ALPHA3_CYP = "CYP"
ALPHA3_CZE = "CZE"
ALPHA3_DNK = "DNK"
ALPHA3_DJI = "DJI"
ALPHA3_DMA = "DMA"
ALPHA3_DOM = "DOM"
ALPHA3_ECU = "ECU"
ALPHA3_EGY = "EGY"
ALPHA3_SLV = "SLV"
ALPHA3_GNQ = "GNQ"
ALPHA3_ERI = "ERI"
ALPHA3_EST = "EST"
ALPHA3_SWZ = "SWZ"
ALPHA3_ETH = "ETH"
ALPHA3_FLK = "FLK"
ALPHA3_FRO = "FRO"
ALPHA3_FJI = "FJI"
ALPHA3_FIN = "FIN"
ALPHA3_FRA = "FRA"
ALPHA3_GUF = "GUF"
ALPHA3_PYF = "PYF"
ALPHA3_ATF = "ATF"
ALPHA3_GAB = "GAB"
ALPHA3_GMB = "GMB"
ALPHA3_GEO = "GEO"
ALPHA3_DEU = "DEU"
ALPHA3_GHA = "GHA"
ALPHA3_GIB = "GIB"
ALPHA3_GRC = "GRC"
ALPHA3_GRL = "GRL"
ALPHA3_GRD = "GRD"
ALPHA3_GLP = "GLP"
ALPHA3_GUM = "GUM"
ALPHA3_GTM = "GTM"
ALPHA3_GGY = "GGY"
ALPHA3_GIN = "GIN"
ALPHA3_GNB = "GNB"
ALPHA3_GUY = "GUY"
ALPHA3_HTI = "HTI"
ALPHA3_HMD = "HMD"
ALPHA3_VAT = "VAT"
ALPHA3_HND = "HND"
ALPHA3_HKG = "HKG"
ALPHA3_HUN = "HUN"
ALPHA3_ISL = "ISL"
ALPHA3_IND = "IND"
ALPHA3_IDN = "IDN"
ALPHA3_IRN = "IRN"
ALPHA3_IRQ = "IRQ"
ALPHA3_IRL = "IRL"
ALPHA3_IMN = "IMN"
ALPHA3_ISR = "ISR"
ALPHA3_ITA = "ITA"
ALPHA3_JAM = "JAM"
ALPHA3_JPN = "JPN"
ALPHA3_JEY = "JEY"
ALPHA3_JOR = "JOR"
ALPHA3_KAZ = "KAZ"
ALPHA3_KEN = "KEN"
ALPHA3_KIR = "KIR"
ALPHA3_PRK = "PRK"
ALPHA3_KOR = "KOR"
ALPHA3_KWT = "KWT"
ALPHA3_KGZ = "KGZ"
ALPHA3_LAO = "LAO"
ALPHA3_LVA = "LVA"
ALPHA3_LBN = "LBN"
ALPHA3_LSO = "LSO"
ALPHA3_LBR = "LBR"
ALPHA3_LBY = "LBY"
ALPHA3_LIE = "LIE"
ALPHA3_LTU = "LTU"
ALPHA3_LUX = "LUX"
ALPHA3_MAC = "MAC"
ALPHA3_MDG = "MDG"
ALPHA3_MWI = "MWI"
ALPHA3_MYS = "MYS"
ALPHA3_MDV = "MDV"
ALPHA3_MLI = "MLI"
ALPHA3_MLT = "MLT"
ALPHA3_MHL = "MHL"
ALPHA3_MTQ = "MTQ"
ALPHA3_MRT = "MRT"
ALPHA3_MUS = "MUS"
ALPHA3_MYT = "MYT"
ALPHA3_MEX = "MEX"
ALPHA3_FSM = "FSM"
ALPHA3_MDA = "MDA"
ALPHA3_MCO = "MCO"
ALPHA3_MNG = "MNG"
ALPHA3_MNE = "MNE"
ALPHA3_MSR = "MSR"
ALPHA3_MAR = "MAR"
ALPHA3_MOZ = "MOZ"
ALPHA3_MMR = "MMR"
ALPHA3_NAM = "NAM"
ALPHA3_NRU = "NRU"
ALPHA3_NPL = "NPL"
ALPHA3_NLD = "NLD"
ALPHA3_NCL = "NCL"
ALPHA3_NZL = "NZL"
ALPHA3_NIC = "NIC"
ALPHA3_NER = "NER"
ALPHA3_NGA = "NGA"
ALPHA3_NIU = "NIU"
ALPHA3_NFK = "NFK"
ALPHA3_MKD = "MKD"
ALPHA3_MNP = "MNP"
ALPHA3_NOR = "NOR"
ALPHA3_OMN = "OMN"
ALPHA3_PAK = "PAK"
ALPHA3_PLW = "PLW"
ALPHA3_PSE = "PSE"
ALPHA3_PAN = "PAN"
ALPHA3_PNG = "PNG"
ALPHA3_PRY = "PRY"
ALPHA3_PER = "PER"
ALPHA3_PHL = "PHL"
ALPHA3_PCN = "PCN"
ALPHA3_POL = "POL"
ALPHA3_PRT = "PRT"
ALPHA3_PRI = "PRI"
ALPHA3_QAT = "QAT"
ALPHA3_REU = "REU"
ALPHA3_ROU = "ROU"
ALPHA3_RUS = "RUS"
ALPHA3_RWA = "RWA"
ALPHA3_BLM = "BLM"
ALPHA3_SHN = "SHN"
ALPHA3_KNA = "KNA"
ALPHA3_LCA = "LCA"
ALPHA3_MAF = "MAF"
ALPHA3_SPM = "SPM"
ALPHA3_VCT = "VCT"
ALPHA3_WSM = "WSM"
ALPHA3_SMR = "SMR"
ALPHA3_STP = "STP"
ALPHA3_SAU = "SAU"
ALPHA3_SEN = "SEN"
ALPHA3_SRB = "SRB"
ALPHA3_SYC = "SYC"
ALPHA3_SLE = "SLE"
ALPHA3_SGP = "SGP"
ALPHA3_SXM = "SXM"
ALPHA3_SVK = "SVK"
ALPHA3_SVN = "SVN"
ALPHA3_SLB = "SLB"
ALPHA3_SOM = "SOM"
ALPHA3_ZAF = "ZAF"
ALPHA3_SGS = "SGS"
ALPHA3_SSD = "SSD"
ALPHA3_ESP = "ESP"
ALPHA3_LKA = "LKA"
ALPHA3_SDN = "SDN"
ALPHA3_SUR = "SUR"
ALPHA3_SJM = "SJM"
ALPHA3_SWE = "SWE"
ALPHA3_CHE = "CHE"
ALPHA3_SYR = "SYR"
ALPHA3_TWN = "TWN"
ALPHA3_TJK = "TJK"
ALPHA3_TZA = "TZA"
ALPHA3_THA = "THA"
ALPHA3_TLS = "TLS"
ALPHA3_TGO = "TGO"
ALPHA3_TKL = "TKL"
ALPHA3_TON = "TON"
ALPHA3_TTO = "TTO"
ALPHA3_TUN = "TUN"
ALPHA3_TUR = "TUR"
ALPHA3_TKM = "TKM"
ALPHA3_TCA = "TCA"
ALPHA3_TUV = "TUV"
ALPHA3_UGA = "UGA"
ALPHA3_UKR = "UKR"
ALPHA3_ARE = "ARE"
ALPHA3_GBR = "GBR"
ALPHA3_USA = "USA"
ALPHA3_UMI = "UMI"
ALPHA3_URY = "URY"
ALPHA3_UZB = "UZB"
ALPHA3_VUT = "VUT"
ALPHA3_VEN = "VEN"
ALPHA3_VNM = "VNM"
ALPHA3_VGB = "VGB"
ALPHA3_VIR = "VIR"
ALPHA3_WLF = "WLF"
ALPHA3_ESH = "ESH"
ALPHA3_YEM = "YEM"
ALPHA3_ZMB = "ZMB"
ALPHA3_ZWE = "ZWE"

COUNTRIES: tuple[Country, ...] = (
    Country(
        alpha2="AF",
        alpha3="AFG",
        capital="Kabul",
        continent_name="Asia",
        country_code="004",
        currency_code="AFN",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:AF",
        name="Afghanistan",
        region="Asia",
        region_code="142",
        sub_region="Southern Asia",
        sub_region_code="034",
    ),
    Country(
        alpha2="AX",
        alpha3="ALA",
        capital="Mariehamn",
        continent_name="Europe",
        country_code="248",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:AX",
        name="Åland Islands",
        region="Europe",
        region_code="150",
        sub_region="Northern Europe",
        sub_region_code="154",
    ),
    Country(
        alpha2="AL",
        alpha3="ALB",
        capital="Tirana",
        continent_name="Europe",
        country_code="008",
        currency_code="ALL",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:AL",
        name="Albania",
        region="Europe",
        region_code="150",
        sub_region="Southern Europe",
        sub_region_code="039",
    ),
    Country(
        alpha2="DZ",
        alpha3="DZA",
        capital="Algiers",
        continent_name="Africa",
        country_code="012",
        currency_code="DZD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:DZ",
        name="Algeria",
        region="Africa",
        region_code="002",
        sub_region="Northern Africa",
        sub_region_code="015",
    ),
    Country(
        alpha2="AS",
        alpha3="ASM",
        capital="Pago Pago",
        continent_name="Oceania",
        country_code="016",
        currency_code="USD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:AS",
        name="American Samoa",
        region="Oceania",
        region_code="009",
        sub_region="Polynesia",
        sub_region_code="061",
    ),
    Country(
        alpha2="AD",
        alpha3="AND",
        capital="Andorra la Vella",
        continent_name="Europe",
        country_code="020",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:AD",
        name="Andorra",
        region="Europe",
        region_code="150",
        sub_region="Southern Europe",
        sub_region_code="039",
    ),
    Country(
        alpha2="AO",
        alpha3="AGO",
        capital="Luanda",
        continent_name="Africa",
        country_code="024",
        currency_code="AOA",
        intermediate_region="Middle Africa",
        intermediate_region_code="017",
        iso31662="ISO 3166-2:AO",
        name="Angola",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="AI",
        alpha3="AIA",
        capital="The Valley",
        continent_name="North America",
        country_code="660",
        currency_code="XCD",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:AI",
        name="Anguilla",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="AQ",
        alpha3="ATA",
        capital="",
        continent_name="Antarctica",
        country_code="010",
        currency_code="",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:AQ",
        name="Antarctica",
        region="",
        region_code="",
        sub_region="",
        sub_region_code="",
    ),
    Country(
        alpha2="AG",
        alpha3="ATG",
        capital="St. John's",
        continent_name="North America",
        country_code="028",
        currency_code="XCD",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:AG",
        name="Antigua and Barbuda",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="AR",
        alpha3="ARG",
        capital="Buenos Aires",
        continent_name="South America",
        country_code="032",
        currency_code="ARS",
        intermediate_region="South America",
        intermediate_region_code="005",
        iso31662="ISO 3166-2:AR",
        name="Argentina",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="AM",
        alpha3="ARM",
        capital="Yerevan",
        continent_name="Asia",
        country_code="051",
        currency_code="AMD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:AM",
        name="Armenia",
        region="Asia",
        region_code="142",
        sub_region="Western Asia",
        sub_region_code="145",
    ),
    Country(
        alpha2="AW",
        alpha3="ABW",
        capital="Oranjestad",
        continent_name="North America",
        country_code="533",
        currency_code="AWG",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:AW",
        name="Aruba",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="AU",
        alpha3="AUS",
        capital="Canberra",
        continent_name="Oceania",
        country_code="036",
        currency_code="AUD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:AU",
        name="Australia",
        region="Oceania",
        region_code="009",
        sub_region="Australia and New Zealand",
        sub_region_code="053",
    ),
    Country(
        alpha2="AT",
        alpha3="AUT",
        capital="Vienna",
        continent_name="Europe",
        country_code="040",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:AT",
        name="Austria",
        region="Europe",
        region_code="150",
        sub_region="Western Europe",
        sub_region_code="155",
    ),
    Country(
        alpha2="AZ",
        alpha3="AZE",
        capital="Baku",
        continent_name="Asia",
        country_code="031",
        currency_code="AZN",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:AZ",
        name="Azerbaijan",
        region="Asia",
        region_code="142",
        sub_region="Western Asia",
        sub_region_code="145",
    ),
    Country(
        alpha2="BS",
        alpha3="BHS",
        capital="Nassau",
        continent_name="North America",
        country_code="044",
        currency_code="BSD",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:BS",
        name="Bahamas",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="BH",
        alpha3="BHR",
        capital="Manama",
        continent_name="Asia",
        country_code="048",
        currency_code="BHD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:BH",
        name="Bahrain",
        region="Asia",
        region_code="142",
        sub_region="Western Asia",
        sub_region_code="145",
    ),
    Country(
        alpha2="BD",
        alpha3="BGD",
        capital="Dhaka",
        continent_name="Asia",
        country_code="050",
        currency_code="BDT",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:BD",
        name="Bangladesh",
        region="Asia",
        region_code="142",
        sub_region="Southern Asia",
        sub_region_code="034",
    ),
    Country(
        alpha2="BB",
        alpha3="BRB",
        capital="Bridgetown",
        continent_name="North America",
        country_code="052",
        currency_code="BBD",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:BB",
        name="Barbados",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="BY",
        alpha3="BLR",
        capital="Minsk",
        continent_name="Europe",
        country_code="112",
        currency_code="BYN",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:BY",
        name="Belarus",
        region="Europe",
        region_code="150",
        sub_region="Eastern Europe",
        sub_region_code="151",
    ),
    Country(
        alpha2="BE",
        alpha3="BEL",
        capital="Brussels",
        continent_name="Europe",
        country_code="056",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:BE",
        name="Belgium",
        region="Europe",
        region_code="150",
        sub_region="Western Europe",
        sub_region_code="155",
    ),
    Country(
        alpha2="BZ",
        alpha3="BLZ",
        capital="Belmopan",
        continent_name="North America",
        country_code="084",
        currency_code="BZD",
        intermediate_region="Central America",
        intermediate_region_code="013",
        iso31662="ISO 3166-2:BZ",
        name="Belize",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="BJ",
        alpha3="BEN",
        capital="Porto-Novo",
        continent_name="Africa",
        country_code="204",
        currency_code="XOF",
        intermediate_region="Western Africa",
        intermediate_region_code="011",
        iso31662="ISO 3166-2:BJ",
        name="Benin",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="BM",
        alpha3="BMU",
        capital="Hamilton",
        continent_name="North America",
        country_code="060",
        currency_code="BMD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:BM",
        name="Bermuda",
        region="Americas",
        region_code="019",
        sub_region="Northern America",
        sub_region_code="021",
    ),
    Country(
        alpha2="BT",
        alpha3="BTN",
        capital="Thimphu",
        continent_name="Asia",
        country_code="064",
        currency_code="BTN",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:BT",
        name="Bhutan",
        region="Asia",
        region_code="142",
        sub_region="Southern Asia",
        sub_region_code="034",
    ),
    Country(
        alpha2="BO",
        alpha3="BOL",
        capital="Sucre",
        continent_name="South America",
        country_code="068",
        currency_code="BOB",
        intermediate_region="South America",
        intermediate_region_code="005",
        iso31662="ISO 3166-2:BO",
        name="Bolivia (Plurinational State of)",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="BQ",
        alpha3="BES",
        capital="Kralendijk",
        continent_name="North America",
        country_code="535",
        currency_code="USD",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:BQ",
        name="Bonaire, Sint Eustatius and Saba",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="BA",
        alpha3="BIH",
        capital="Sarajevo",
        continent_name="Europe",
        country_code="070",
        currency_code="BAM",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:BA",
        name="Bosnia and Herzegovina",
        region="Europe",
        region_code="150",
        sub_region="Southern Europe",
        sub_region_code="039",
    ),
    Country(
        alpha2="BW",
        alpha3="BWA",
        capital="Gaborone",
        continent_name="Africa",
        country_code="072",
        currency_code="BWP",
        intermediate_region="Southern Africa",
        intermediate_region_code="018",
        iso31662="ISO 3166-2:BW",
        name="Botswana",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="BV",
        alpha3="BVT",
        capital="",
        continent_name="Antarctica",
        country_code="074",
        currency_code="NOK",
        intermediate_region="South America",
        intermediate_region_code="005",
        iso31662="ISO 3166-2:BV",
        name="Bouvet Island",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="BR",
        alpha3="BRA",
        capital="Brasília",
        continent_name="South America",
        country_code="076",
        currency_code="BRL",
        intermediate_region="South America",
        intermediate_region_code="005",
        iso31662="ISO 3166-2:BR",
        name="Brazil",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="IO",
        alpha3="IOT",
        capital="Diego Garcia",
        continent_name="Asia",
        country_code="086",
        currency_code="USD",
        intermediate_region="Eastern Africa",
        intermediate_region_code="014",
        iso31662="ISO 3166-2:IO",
        name="British Indian Ocean Territory",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="BN",
        alpha3="BRN",
        capital="Bandar Seri Begawan",
        continent_name="Asia",
        country_code="096",
        currency_code="BND",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:BN",
        name="Brunei Darussalam",
        region="Asia",
        region_code="142",
        sub_region="South-eastern Asia",
        sub_region_code="035",
    ),
    Country(
        alpha2="BG",
        alpha3="BGR",
        capital="Sofia",
        continent_name="Europe",
        country_code="100",
        currency_code="BGN",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:BG",
        name="Bulgaria",
        region="Europe",
        region_code="150",
        sub_region="Eastern Europe",
        sub_region_code="151",
    ),
    Country(
        alpha2="BF",
        alpha3="BFA",
        capital="Ouagadougou",
        continent_name="Africa",
        country_code="854",
        currency_code="XOF",
        intermediate_region="Western Africa",
        intermediate_region_code="011",
        iso31662="ISO 3166-2:BF",
        name="Burkina Faso",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="BI",
        alpha3="BDI",
        capital="Gitega",
        continent_name="Africa",
        country_code="108",
        currency_code="BIF",
        intermediate_region="Eastern Africa",
        intermediate_region_code="014",
        iso31662="ISO 3166-2:BI",
        name="Burundi",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="CV",
        alpha3="CPV",
        capital="Praia",
        continent_name="Africa",
        country_code="132",
        currency_code="CVE",
        intermediate_region="Western Africa",
        intermediate_region_code="011",
        iso31662="ISO 3166-2:CV",
        name="Cabo Verde",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="KH",
        alpha3="KHM",
        capital="Phnom Penh",
        continent_name="Asia",
        country_code="116",
        currency_code="KHR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:KH",
        name="Cambodia",
        region="Asia",
        region_code="142",
        sub_region="South-eastern Asia",
        sub_region_code="035",
    ),
    Country(
        alpha2="CM",
        alpha3="CMR",
        capital="Yaoundé",
        continent_name="Africa",
        country_code="120",
        currency_code="XAF",
        intermediate_region="Middle Africa",
        intermediate_region_code="017",
        iso31662="ISO 3166-2:CM",
        name="Cameroon",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="CA",
        alpha3="CAN",
        capital="Ottawa",
        continent_name="North America",
        country_code="124",
        currency_code="CAD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:CA",
        name="Canada",
        region="Americas",
        region_code="019",
        sub_region="Northern America",
        sub_region_code="021",
    ),
    Country(
        alpha2="KY",
        alpha3="CYM",
        capital="George Town",
        continent_name="North America",
        country_code="136",
        currency_code="KYD",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:KY",
        name="Cayman Islands",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="CF",
        alpha3="CAF",
        capital="Bangui",
        continent_name="Africa",
        country_code="140",
        currency_code="XAF",
        intermediate_region="Middle Africa",
        intermediate_region_code="017",
        iso31662="ISO 3166-2:CF",
        name="Central African Republic",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="TD",
        alpha3="TCD",
        capital="N'Djamena",
        continent_name="Africa",
        country_code="148",
        currency_code="XAF",
        intermediate_region="Middle Africa",
        intermediate_region_code="017",
        iso31662="ISO 3166-2:TD",
        name="Chad",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="CL",
        alpha3="CHL",
        capital="Santiago",
        continent_name="South America",
        country_code="152",
        currency_code="CLP",
        intermediate_region="South America",
        intermediate_region_code="005",
        iso31662="ISO 3166-2:CL",
        name="Chile",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="CN",
        alpha3="CHN",
        capital="Beijing",
        continent_name="Asia",
        country_code="156",
        currency_code="CNY",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:CN",
        name="China",
        region="Asia",
        region_code="142",
        sub_region="Eastern Asia",
        sub_region_code="030",
    ),
    Country(
        alpha2="CX",
        alpha3="CXR",
        capital="Flying Fish Cove",
        continent_name="Oceania",
        country_code="162",
        currency_code="AUD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:CX",
        name="Christmas Island",
        region="Oceania",
        region_code="009",
        sub_region="Australia and New Zealand",
        sub_region_code="053",
    ),
    Country(
        alpha2="CC",
        alpha3="CCK",
        capital="West Island",
        continent_name="Asia",
        country_code="166",
        currency_code="AUD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:CC",
        name="Cocos (Keeling) Islands",
        region="Oceania",
        region_code="009",
        sub_region="Australia and New Zealand",
        sub_region_code="053",
    ),
    Country(
        alpha2="CO",
        alpha3="COL",
        capital="Bogotá",
        continent_name="South America",
        country_code="170",
        currency_code="COP",
        intermediate_region="South America",
        intermediate_region_code="005",
        iso31662="ISO 3166-2:CO",
        name="Colombia",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="KM",
        alpha3="COM",
        capital="Moroni",
        continent_name="Africa",
        country_code="174",
        currency_code="KMF",
        intermediate_region="Eastern Africa",
        intermediate_region_code="014",
        iso31662="ISO 3166-2:KM",
        name="Comoros",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="CG",
        alpha3="COG",
        capital="Brazzaville",
        continent_name="Africa",
        country_code="178",
        currency_code="XAF",
        intermediate_region="Middle Africa",
        intermediate_region_code="017",
        iso31662="ISO 3166-2:CG",
        name="Congo",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="CD",
        alpha3="COD",
        capital="Kinshasa",
        continent_name="Africa",
        country_code="180",
        currency_code="CDF",
        intermediate_region="Middle Africa",
        intermediate_region_code="017",
        iso31662="ISO 3166-2:CD",
        name="Congo, Democratic Republic of the",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="CK",
        alpha3="COK",
        capital="Avarua",
        continent_name="Oceania",
        country_code="184",
        currency_code="NZD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:CK",
        name="Cook Islands",
        region="Oceania",
        region_code="009",
        sub_region="Polynesia",
        sub_region_code="061",
    ),
    Country(
        alpha2="CR",
        alpha3="CRI",
        capital="San José",
        continent_name="North America",
        country_code="188",
        currency_code="CRC",
        intermediate_region="Central America",
        intermediate_region_code="013",
        iso31662="ISO 3166-2:CR",
        name="Costa Rica",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="CI",
        alpha3="CIV",
        capital="Yamoussoukro",
        continent_name="Africa",
        country_code="384",
        currency_code="XOF",
        intermediate_region="Western Africa",
        intermediate_region_code="011",
        iso31662="ISO 3166-2:CI",
        name="Côte d'Ivoire",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="HR",
        alpha3="HRV",
        capital="Zagreb",
        continent_name="Europe",
        country_code="191",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:HR",
        name="Croatia",
        region="Europe",
        region_code="150",
        sub_region="Southern Europe",
        sub_region_code="039",
    ),
    Country(
        alpha2="CU",
        alpha3="CUB",
        capital="Havana",
        continent_name="North America",
        country_code="192",
        currency_code="CUP",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:CU",
        name="Cuba",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="CW",
        alpha3="CUW",
        capital="Willemstad",
        continent_name="North America",
        country_code="531",
        currency_code="ANG",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:CW",
        name="Curaçao",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="CY",
        alpha3="CYP",
        capital="Nicosia",
        continent_name="Europe",
        country_code="196",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:CY",
        name="Cyprus",
        region="Asia",
        region_code="142",
        sub_region="Western Asia",
        sub_region_code="145",
    ),
    Country(
        alpha2="CZ",
        alpha3="CZE",
        capital="Prague",
        continent_name="Europe",
        country_code="203",
        currency_code="CZK",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:CZ",
        name="Czechia",
        region="Europe",
        region_code="150",
        sub_region="Eastern Europe",
        sub_region_code="151",
    ),
    Country(
        alpha2="DK",
        alpha3="DNK",
        capital="Copenhagen",
        continent_name="Europe",
        country_code="208",
        currency_code="DKK",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:DK",
        name="Denmark",
        region="Europe",
        region_code="150",
        sub_region="Northern Europe",
        sub_region_code="154",
    ),
    Country(
        alpha2="DJ",
        alpha3="DJI",
        capital="Djibouti",
        continent_name="Africa",
        country_code="262",
        currency_code="DJF",
        intermediate_region="Eastern Africa",
        intermediate_region_code="014",
        iso31662="ISO 3166-2:DJ",
        name="Djibouti",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="DM",
        alpha3="DMA",
        capital="Roseau",
        continent_name="North America",
        country_code="212",
        currency_code="XCD",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:DM",
        name="Dominica",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="DO",
        alpha3="DOM",
        capital="Santo Domingo",
        continent_name="North America",
        country_code="214",
        currency_code="DOP",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:DO",
        name="Dominican Republic",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="EC",
        alpha3="ECU",
        capital="Quito",
        continent_name="South America",
        country_code="218",
        currency_code="USD",
        intermediate_region="South America",
        intermediate_region_code="005",
        iso31662="ISO 3166-2:EC",
        name="Ecuador",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="EG",
        alpha3="EGY",
        capital="Cairo",
        continent_name="Africa",
        country_code="818",
        currency_code="EGP",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:EG",
        name="Egypt",
        region="Africa",
        region_code="002",
        sub_region="Northern Africa",
        sub_region_code="015",
    ),
    Country(
        alpha2="SV",
        alpha3="SLV",
        capital="San Salvador",
        continent_name="North America",
        country_code="222",
        currency_code="USD",
        intermediate_region="Central America",
        intermediate_region_code="013",
        iso31662="ISO 3166-2:SV",
        name="El Salvador",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="GQ",
        alpha3="GNQ",
        capital="Malabo",
        continent_name="Africa",
        country_code="226",
        currency_code="XAF",
        intermediate_region="Middle Africa",
        intermediate_region_code="017",
        iso31662="ISO 3166-2:GQ",
        name="Equatorial Guinea",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="ER",
        alpha3="ERI",
        capital="Asmara",
        continent_name="Africa",
        country_code="232",
        currency_code="ERN",
        intermediate_region="Eastern Africa",
        intermediate_region_code="014",
        iso31662="ISO 3166-2:ER",
        name="Eritrea",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="EE",
        alpha3="EST",
        capital="Tallinn",
        continent_name="Europe",
        country_code="233",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:EE",
        name="Estonia",
        region="Europe",
        region_code="150",
        sub_region="Northern Europe",
        sub_region_code="154",
    ),
    Country(
        alpha2="SZ",
        alpha3="SWZ",
        capital="Mbabane",
        continent_name="Africa",
        country_code="748",
        currency_code="SZL",
        intermediate_region="Southern Africa",
        intermediate_region_code="018",
        iso31662="ISO 3166-2:SZ",
        name="Eswatini",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="ET",
        alpha3="ETH",
        capital="Addis Ababa",
        continent_name="Africa",
        country_code="231",
        currency_code="ETB",
        intermediate_region="Eastern Africa",
        intermediate_region_code="014",
        iso31662="ISO 3166-2:ET",
        name="Ethiopia",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="FK",
        alpha3="FLK",
        capital="Stanley",
        continent_name="South America",
        country_code="238",
        currency_code="FKP",
        intermediate_region="South America",
        intermediate_region_code="005",
        iso31662="ISO 3166-2:FK",
        name="Falkland Islands (Malvinas)",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="FO",
        alpha3="FRO",
        capital="Tórshavn",
        continent_name="Europe",
        country_code="234",
        currency_code="DKK",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:FO",
        name="Faroe Islands",
        region="Europe",
        region_code="150",
        sub_region="Northern Europe",
        sub_region_code="154",
    ),
    Country(
        alpha2="FJ",
        alpha3="FJI",
        capital="Suva",
        continent_name="Oceania",
        country_code="242",
        currency_code="FJD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:FJ",
        name="Fiji",
        region="Oceania",
        region_code="009",
        sub_region="Melanesia",
        sub_region_code="054",
    ),
    Country(
        alpha2="FI",
        alpha3="FIN",
        capital="Helsinki",
        continent_name="Europe",
        country_code="246",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:FI",
        name="Finland",
        region="Europe",
        region_code="150",
        sub_region="Northern Europe",
        sub_region_code="154",
    ),
    Country(
        alpha2="FR",
        alpha3="FRA",
        capital="Paris",
        continent_name="Europe",
        country_code="250",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:FR",
        name="France",
        region="Europe",
        region_code="150",
        sub_region="Western Europe",
        sub_region_code="155",
    ),
    Country(
        alpha2="GF",
        alpha3="GUF",
        capital="Cayenne",
        continent_name="South America",
        country_code="254",
        currency_code="EUR",
        intermediate_region="South America",
        intermediate_region_code="005",
        iso31662="ISO 3166-2:GF",
        name="French Guiana",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="PF",
        alpha3="PYF",
        capital="Papeete",
        continent_name="Oceania",
        country_code="258",
        currency_code="XPF",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:PF",
        name="French Polynesia",
        region="Oceania",
        region_code="009",
        sub_region="Polynesia",
        sub_region_code="061",
    ),
    Country(
        alpha2="TF",
        alpha3="ATF",
        capital="Port-aux-Français",
        continent_name="Antarctica",
        country_code="260",
        currency_code="EUR",
        intermediate_region="Eastern Africa",
        intermediate_region_code="014",
        iso31662="ISO 3166-2:TF",
        name="French Southern Territories",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="GA",
        alpha3="GAB",
        capital="Libreville",
        continent_name="Africa",
        country_code="266",
        currency_code="XAF",
        intermediate_region="Middle Africa",
        intermediate_region_code="017",
        iso31662="ISO 3166-2:GA",
        name="Gabon",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="GM",
        alpha3="GMB",
        capital="Banjul",
        continent_name="Africa",
        country_code="270",
        currency_code="GMD",
        intermediate_region="Western Africa",
        intermediate_region_code="011",
        iso31662="ISO 3166-2:GM",
        name="Gambia",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="GE",
        alpha3="GEO",
        capital="Tbilisi",
        continent_name="Asia",
        country_code="268",
        currency_code="GEL",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:GE",
        name="Georgia",
        region="Asia",
        region_code="142",
        sub_region="Western Asia",
        sub_region_code="145",
    ),
    Country(
        alpha2="DE",
        alpha3="DEU",
        capital="Berlin",
        continent_name="Europe",
        country_code="276",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:DE",
        name="Germany",
        region="Europe",
        region_code="150",
        sub_region="Western Europe",
        sub_region_code="155",
    ),
    Country(
        alpha2="GH",
        alpha3="GHA",
        capital="Accra",
        continent_name="Africa",
        country_code="288",
        currency_code="GHS",
        intermediate_region="Western Africa",
        intermediate_region_code="011",
        iso31662="ISO 3166-2:GH",
        name="Ghana",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="GI",
        alpha3="GIB",
        capital="Gibraltar",
        continent_name="Europe",
        country_code="292",
        currency_code="GIP",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:GI",
        name="Gibraltar",
        region="Europe",
        region_code="150",
        sub_region="Southern Europe",
        sub_region_code="039",
    ),
    Country(
        alpha2="GR",
        alpha3="GRC",
        capital="Athens",
        continent_name="Europe",
        country_code="300",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:GR",
        name="Greece",
        region="Europe",
        region_code="150",
        sub_region="Southern Europe",
        sub_region_code="039",
    ),
    Country(
        alpha2="GL",
        alpha3="GRL",
        capital="Nuuk",
        continent_name="North America",
        country_code="304",
        currency_code="DKK",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:GL",
        name="Greenland",
        region="Americas",
        region_code="019",
        sub_region="Northern America",
        sub_region_code="021",
    ),
    Country(
        alpha2="GD",
        alpha3="GRD",
        capital="St. George's",
        continent_name="North America",
        country_code="308",
        currency_code="XCD",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:GD",
        name="Grenada",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="GP",
        alpha3="GLP",
        capital="Basse-Terre",
        continent_name="North America",
        country_code="312",
        currency_code="EUR",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:GP",
        name="Guadeloupe",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="GU",
        alpha3="GUM",
        capital="Hagåtña",
        continent_name="Oceania",
        country_code="316",
        currency_code="USD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:GU",
        name="Guam",
        region="Oceania",
        region_code="009",
        sub_region="Micronesia",
        sub_region_code="057",
    ),
    Country(
        alpha2="GT",
        alpha3="GTM",
        capital="Guatemala City",
        continent_name="North America",
        country_code="320",
        currency_code="GTQ",
        intermediate_region="Central America",
        intermediate_region_code="013",
        iso31662="ISO 3166-2:GT",
        name="Guatemala",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="GG",
        alpha3="GGY",
        capital="St Peter Port",
        continent_name="Europe",
        country_code="831",
        currency_code="GBP",
        intermediate_region="Channel Islands",
        intermediate_region_code="830",
        iso31662="ISO 3166-2:GG",
        name="Guernsey",
        region="Europe",
        region_code="150",
        sub_region="Northern Europe",
        sub_region_code="154",
    ),
    Country(
        alpha2="GN",
        alpha3="GIN",
        capital="Conakry",
        continent_name="Africa",
        country_code="324",
        currency_code="GNF",
        intermediate_region="Western Africa",
        intermediate_region_code="011",
        iso31662="ISO 3166-2:GN",
        name="Guinea",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="GW",
        alpha3="GNB",
        capital="Bissau",
        continent_name="Africa",
        country_code="624",
        currency_code="XOF",
        intermediate_region="Western Africa",
        intermediate_region_code="011",
        iso31662="ISO 3166-2:GW",
        name="Guinea-Bissau",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="GY",
        alpha3="GUY",
        capital="Georgetown",
        continent_name="South America",
        country_code="328",
        currency_code="GYD",
        intermediate_region="South America",
        intermediate_region_code="005",
        iso31662="ISO 3166-2:GY",
        name="Guyana",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="HT",
        alpha3="HTI",
        capital="Port-au-Prince",
        continent_name="North America",
        country_code="332",
        currency_code="HTG",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:HT",
        name="Haiti",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="HM",
        alpha3="HMD",
        capital="",
        continent_name="Antarctica",
        country_code="334",
        currency_code="AUD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:HM",
        name="Heard Island and McDonald Islands",
        region="Oceania",
        region_code="009",
        sub_region="Australia and New Zealand",
        sub_region_code="053",
    ),
    Country(
        alpha2="VA",
        alpha3="VAT",
        capital="Vatican City",
        continent_name="Europe",
        country_code="336",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:VA",
        name="Holy See",
        region="Europe",
        region_code="150",
        sub_region="Southern Europe",
        sub_region_code="039",
    ),
    Country(
        alpha2="HN",
        alpha3="HND",
        capital="Tegucigalpa",
        continent_name="North America",
        country_code="340",
        currency_code="HNL",
        intermediate_region="Central America",
        intermediate_region_code="013",
        iso31662="ISO 3166-2:HN",
        name="Honduras",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="HK",
        alpha3="HKG",
        capital="Hong Kong",
        continent_name="Asia",
        country_code="344",
        currency_code="HKD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:HK",
        name="Hong Kong",
        region="Asia",
        region_code="142",
        sub_region="Eastern Asia",
        sub_region_code="030",
    ),
    Country(
        alpha2="HU",
        alpha3="HUN",
        capital="Budapest",
        continent_name="Europe",
        country_code="348",
        currency_code="HUF",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:HU",
        name="Hungary",
        region="Europe",
        region_code="150",
        sub_region="Eastern Europe",
        sub_region_code="151",
    ),
    Country(
        alpha2="IS",
        alpha3="ISL",
        capital="Reykjavik",
        continent_name="Europe",
        country_code="352",
        currency_code="ISK",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:IS",
        name="Iceland",
        region="Europe",
        region_code="150",
        sub_region="Northern Europe",
        sub_region_code="154",
    ),
    Country(
        alpha2="IN",
        alpha3="IND",
        capital="New Delhi",
        continent_name="Asia",
        country_code="356",
        currency_code="INR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:IN",
        name="India",
        region="Asia",
        region_code="142",
        sub_region="Southern Asia",
        sub_region_code="034",
    ),
    Country(
        alpha2="ID",
        alpha3="IDN",
        capital="Jakarta",
        continent_name="Asia",
        country_code="360",
        currency_code="IDR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:ID",
        name="Indonesia",
        region="Asia",
        region_code="142",
        sub_region="South-eastern Asia",
        sub_region_code="035",
    ),
    Country(
        alpha2="IR",
        alpha3="IRN",
        capital="Tehran",
        continent_name="Asia",
        country_code="364",
        currency_code="IRR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:IR",
        name="Iran (Islamic Republic of)",
        region="Asia",
        region_code="142",
        sub_region="Southern Asia",
        sub_region_code="034",
    ),
    Country(
        alpha2="IQ",
        alpha3="IRQ",
        capital="Baghdad",
        continent_name="Asia",
        country_code="368",
        currency_code="IQD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:IQ",
        name="Iraq",
        region="Asia",
        region_code="142",
        sub_region="Western Asia",
        sub_region_code="145",
    ),
    Country(
        alpha2="IE",
        alpha3="IRL",
        capital="Dublin",
        continent_name="Europe",
        country_code="372",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:IE",
        name="Ireland",
        region="Europe",
        region_code="150",
        sub_region="Northern Europe",
        sub_region_code="154",
    ),
    Country(
        alpha2="IM",
        alpha3="IMN",
        capital="Douglas",
        continent_name="Europe",
        country_code="833",
        currency_code="GBP",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:IM",
        name="Isle of Man",
        region="Europe",
        region_code="150",
        sub_region="Northern Europe",
        sub_region_code="154",
    ),
    Country(
        alpha2="IL",
        alpha3="ISR",
        capital="Jerusalem",
        continent_name="Asia",
        country_code="376",
        currency_code="ILS",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:IL",
        name="Israel",
        region="Asia",
        region_code="142",
        sub_region="Western Asia",
        sub_region_code="145",
    ),
    Country(
        alpha2="IT",
        alpha3="ITA",
        capital="Rome",
        continent_name="Europe",
        country_code="380",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:IT",
        name="Italy",
        region="Europe",
        region_code="150",
        sub_region="Southern Europe",
        sub_region_code="039",
    ),
    Country(
        alpha2="JM",
        alpha3="JAM",
        capital="Kingston",
        continent_name="North America",
        country_code="388",
        currency_code="JMD",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:JM",
        name="Jamaica",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="JP",
        alpha3="JPN",
        capital="Tokyo",
        continent_name="Asia",
        country_code="392",
        currency_code="JPY",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:JP",
        name="Japan",
        region="Asia",
        region_code="142",
        sub_region="Eastern Asia",
        sub_region_code="030",
    ),
    Country(
        alpha2="JE",
        alpha3="JEY",
        capital="Saint Helier",
        continent_name="Europe",
        country_code="832",
        currency_code="GBP",
        intermediate_region="Channel Islands",
        intermediate_region_code="830",
        iso31662="ISO 3166-2:JE",
        name="Jersey",
        region="Europe",
        region_code="150",
        sub_region="Northern Europe",
        sub_region_code="154",
    ),
    Country(
        alpha2="JO",
        alpha3="JOR",
        capital="Amman",
        continent_name="Asia",
        country_code="400",
        currency_code="JOD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:JO",
        name="Jordan",
        region="Asia",
        region_code="142",
        sub_region="Western Asia",
        sub_region_code="145",
    ),
    Country(
        alpha2="KZ",
        alpha3="KAZ",
        capital="Astana",
        continent_name="Asia",
        country_code="398",
        currency_code="KZT",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:KZ",
        name="Kazakhstan",
        region="Asia",
        region_code="142",
        sub_region="Central Asia",
        sub_region_code="143",
    ),
    Country(
        alpha2="KE",
        alpha3="KEN",
        capital="Nairobi",
        continent_name="Africa",
        country_code="404",
        currency_code="KES",
        intermediate_region="Eastern Africa",
        intermediate_region_code="014",
        iso31662="ISO 3166-2:KE",
        name="Kenya",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="KI",
        alpha3="KIR",
        capital="Tarawa",
        continent_name="Oceania",
        country_code="296",
        currency_code="AUD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:KI",
        name="Kiribati",
        region="Oceania",
        region_code="009",
        sub_region="Micronesia",
        sub_region_code="057",
    ),
    Country(
        alpha2="KP",
        alpha3="PRK",
        capital="Pyongyang",
        continent_name="Asia",
        country_code="408",
        currency_code="KPW",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:KP",
        name="Korea (Democratic People's Republic of)",
        region="Asia",
        region_code="142",
        sub_region="Eastern Asia",
        sub_region_code="030",
    ),
    Country(
        alpha2="KR",
        alpha3="KOR",
        capital="Seoul",
        continent_name="Asia",
        country_code="410",
        currency_code="KRW",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:KR",
        name="Korea, Republic of",
        region="Asia",
        region_code="142",
        sub_region="Eastern Asia",
        sub_region_code="030",
    ),
    Country(
        alpha2="KW",
        alpha3="KWT",
        capital="Kuwait City",
        continent_name="Asia",
        country_code="414",
        currency_code="KWD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:KW",
        name="Kuwait",
        region="Asia",
        region_code="142",
        sub_region="Western Asia",
        sub_region_code="145",
    ),
    Country(
        alpha2="KG",
        alpha3="KGZ",
        capital="Bishkek",
        continent_name="Asia",
        country_code="417",
        currency_code="KGS",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:KG",
        name="Kyrgyzstan",
        region="Asia",
        region_code="142",
        sub_region="Central Asia",
        sub_region_code="143",
    ),
    Country(
        alpha2="LA",
        alpha3="LAO",
        capital="Vientiane",
        continent_name="Asia",
        country_code="418",
        currency_code="LAK",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:LA",
        name="Lao People's Democratic Republic",
        region="Asia",
        region_code="142",
        sub_region="South-eastern Asia",
        sub_region_code="035",
    ),
    Country(
        alpha2="LV",
        alpha3="LVA",
        capital="Riga",
        continent_name="Europe",
        country_code="428",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:LV",
        name="Latvia",
        region="Europe",
        region_code="150",
        sub_region="Northern Europe",
        sub_region_code="154",
    ),
    Country(
        alpha2="LB",
        alpha3="LBN",
        capital="Beirut",
        continent_name="Asia",
        country_code="422",
        currency_code="LBP",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:LB",
        name="Lebanon",
        region="Asia",
        region_code="142",
        sub_region="Western Asia",
        sub_region_code="145",
    ),
    Country(
        alpha2="LS",
        alpha3="LSO",
        capital="Maseru",
        continent_name="Africa",
        country_code="426",
        currency_code="LSL",
        intermediate_region="Southern Africa",
        intermediate_region_code="018",
        iso31662="ISO 3166-2:LS",
        name="Lesotho",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="LR",
        alpha3="LBR",
        capital="Monrovia",
        continent_name="Africa",
        country_code="430",
        currency_code="LRD",
        intermediate_region="Western Africa",
        intermediate_region_code="011",
        iso31662="ISO 3166-2:LR",
        name="Liberia",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="LY",
        alpha3="LBY",
        capital="Tripoli",
        continent_name="Africa",
        country_code="434",
        currency_code="LYD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:LY",
        name="Libya",
        region="Africa",
        region_code="002",
        sub_region="Northern Africa",
        sub_region_code="015",
    ),
    Country(
        alpha2="LI",
        alpha3="LIE",
        capital="Vaduz",
        continent_name="Europe",
        country_code="438",
        currency_code="CHF",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:LI",
        name="Liechtenstein",
        region="Europe",
        region_code="150",
        sub_region="Western Europe",
        sub_region_code="155",
    ),
    Country(
        alpha2="LT",
        alpha3="LTU",
        capital="Vilnius",
        continent_name="Europe",
        country_code="440",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:LT",
        name="Lithuania",
        region="Europe",
        region_code="150",
        sub_region="Northern Europe",
        sub_region_code="154",
    ),
    Country(
        alpha2="LU",
        alpha3="LUX",
        capital="Luxembourg",
        continent_name="Europe",
        country_code="442",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:LU",
        name="Luxembourg",
        region="Europe",
        region_code="150",
        sub_region="Western Europe",
        sub_region_code="155",
    ),
    Country(
        alpha2="MO",
        alpha3="MAC",
        capital="Macao",
        continent_name="Asia",
        country_code="446",
        currency_code="MOP",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:MO",
        name="Macao",
        region="Asia",
        region_code="142",
        sub_region="Eastern Asia",
        sub_region_code="030",
    ),
    Country(
        alpha2="MG",
        alpha3="MDG",
        capital="Antananarivo",
        continent_name="Africa",
        country_code="450",
        currency_code="MGA",
        intermediate_region="Eastern Africa",
        intermediate_region_code="014",
        iso31662="ISO 3166-2:MG",
        name="Madagascar",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="MW",
        alpha3="MWI",
        capital="Lilongwe",
        continent_name="Africa",
        country_code="454",
        currency_code="MWK",
        intermediate_region="Eastern Africa",
        intermediate_region_code="014",
        iso31662="ISO 3166-2:MW",
        name="Malawi",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="MY",
        alpha3="MYS",
        capital="Kuala Lumpur",
        continent_name="Asia",
        country_code="458",
        currency_code="MYR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:MY",
        name="Malaysia",
        region="Asia",
        region_code="142",
        sub_region="South-eastern Asia",
        sub_region_code="035",
    ),
    Country(
        alpha2="MV",
        alpha3="MDV",
        capital="Malé",
        continent_name="Asia",
        country_code="462",
        currency_code="MVR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:MV",
        name="Maldives",
        region="Asia",
        region_code="142",
        sub_region="Southern Asia",
        sub_region_code="034",
    ),
    Country(
        alpha2="ML",
        alpha3="MLI",
        capital="Bamako",
        continent_name="Africa",
        country_code="466",
        currency_code="XOF",
        intermediate_region="Western Africa",
        intermediate_region_code="011",
        iso31662="ISO 3166-2:ML",
        name="Mali",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="MT",
        alpha3="MLT",
        capital="Valletta",
        continent_name="Europe",
        country_code="470",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:MT",
        name="Malta",
        region="Europe",
        region_code="150",
        sub_region="Southern Europe",
        sub_region_code="039",
    ),
    Country(
        alpha2="MH",
        alpha3="MHL",
        capital="Majuro",
        continent_name="Oceania",
        country_code="584",
        currency_code="USD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:MH",
        name="Marshall Islands",
        region="Oceania",
        region_code="009",
        sub_region="Micronesia",
        sub_region_code="057",
    ),
    Country(
        alpha2="MQ",
        alpha3="MTQ",
        capital="Fort-de-France",
        continent_name="North America",
        country_code="474",
        currency_code="EUR",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:MQ",
        name="Martinique",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="MR",
        alpha3="MRT",
        capital="Nouakchott",
        continent_name="Africa",
        country_code="478",
        currency_code="MRU",
        intermediate_region="Western Africa",
        intermediate_region_code="011",
        iso31662="ISO 3166-2:MR",
        name="Mauritania",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="MU",
        alpha3="MUS",
        capital="Port Louis",
        continent_name="Africa",
        country_code="480",
        currency_code="MUR",
        intermediate_region="Eastern Africa",
        intermediate_region_code="014",
        iso31662="ISO 3166-2:MU",
        name="Mauritius",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="YT",
        alpha3="MYT",
        capital="Mamoudzou",
        continent_name="Africa",
        country_code="175",
        currency_code="EUR",
        intermediate_region="Eastern Africa",
        intermediate_region_code="014",
        iso31662="ISO 3166-2:YT",
        name="Mayotte",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="MX",
        alpha3="MEX",
        capital="Mexico City",
        continent_name="North America",
        country_code="484",
        currency_code="MXN",
        intermediate_region="Central America",
        intermediate_region_code="013",
        iso31662="ISO 3166-2:MX",
        name="Mexico",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="FM",
        alpha3="FSM",
        capital="Palikir",
        continent_name="Oceania",
        country_code="583",
        currency_code="USD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:FM",
        name="Micronesia (Federated States of)",
        region="Oceania",
        region_code="009",
        sub_region="Micronesia",
        sub_region_code="057",
    ),
    Country(
        alpha2="MD",
        alpha3="MDA",
        capital="Chişinău",
        continent_name="Europe",
        country_code="498",
        currency_code="MDL",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:MD",
        name="Moldova, Republic of",
        region="Europe",
        region_code="150",
        sub_region="Eastern Europe",
        sub_region_code="151",
    ),
    Country(
        alpha2="MC",
        alpha3="MCO",
        capital="Monaco",
        continent_name="Europe",
        country_code="492",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:MC",
        name="Monaco",
        region="Europe",
        region_code="150",
        sub_region="Western Europe",
        sub_region_code="155",
    ),
    Country(
        alpha2="MN",
        alpha3="MNG",
        capital="Ulaanbaatar",
        continent_name="Asia",
        country_code="496",
        currency_code="MNT",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:MN",
        name="Mongolia",
        region="Asia",
        region_code="142",
        sub_region="Eastern Asia",
        sub_region_code="030",
    ),
    Country(
        alpha2="ME",
        alpha3="MNE",
        capital="Podgorica",
        continent_name="Europe",
        country_code="499",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:ME",
        name="Montenegro",
        region="Europe",
        region_code="150",
        sub_region="Southern Europe",
        sub_region_code="039",
    ),
    Country(
        alpha2="MS",
        alpha3="MSR",
        capital="Plymouth",
        continent_name="North America",
        country_code="500",
        currency_code="XCD",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:MS",
        name="Montserrat",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="MA",
        alpha3="MAR",
        capital="Rabat",
        continent_name="Africa",
        country_code="504",
        currency_code="MAD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:MA",
        name="Morocco",
        region="Africa",
        region_code="002",
        sub_region="Northern Africa",
        sub_region_code="015",
    ),
    Country(
        alpha2="MZ",
        alpha3="MOZ",
        capital="Maputo",
        continent_name="Africa",
        country_code="508",
        currency_code="MZN",
        intermediate_region="Eastern Africa",
        intermediate_region_code="014",
        iso31662="ISO 3166-2:MZ",
        name="Mozambique",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="MM",
        alpha3="MMR",
        capital="Nay Pyi Taw",
        continent_name="Asia",
        country_code="104",
        currency_code="MMK",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:MM",
        name="Myanmar",
        region="Asia",
        region_code="142",
        sub_region="South-eastern Asia",
        sub_region_code="035",
    ),
    Country(
        alpha2="NA",
        alpha3="NAM",
        capital="Windhoek",
        continent_name="Africa",
        country_code="516",
        currency_code="NAD",
        intermediate_region="Southern Africa",
        intermediate_region_code="018",
        iso31662="ISO 3166-2:NA",
        name="Namibia",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="NR",
        alpha3="NRU",
        capital="Yaren",
        continent_name="Oceania",
        country_code="520",
        currency_code="AUD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:NR",
        name="Nauru",
        region="Oceania",
        region_code="009",
        sub_region="Micronesia",
        sub_region_code="057",
    ),
    Country(
        alpha2="NP",
        alpha3="NPL",
        capital="Kathmandu",
        continent_name="Asia",
        country_code="524",
        currency_code="NPR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:NP",
        name="Nepal",
        region="Asia",
        region_code="142",
        sub_region="Southern Asia",
        sub_region_code="034",
    ),
    Country(
        alpha2="NL",
        alpha3="NLD",
        capital="Amsterdam",
        continent_name="Europe",
        country_code="528",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:NL",
        name="Netherlands, Kingdom of the",
        region="Europe",
        region_code="150",
        sub_region="Western Europe",
        sub_region_code="155",
    ),
    Country(
        alpha2="NC",
        alpha3="NCL",
        capital="Nouméa",
        continent_name="Oceania",
        country_code="540",
        currency_code="XPF",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:NC",
        name="New Caledonia",
        region="Oceania",
        region_code="009",
        sub_region="Melanesia",
        sub_region_code="054",
    ),
    Country(
        alpha2="NZ",
        alpha3="NZL",
        capital="Wellington",
        continent_name="Oceania",
        country_code="554",
        currency_code="NZD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:NZ",
        name="New Zealand",
        region="Oceania",
        region_code="009",
        sub_region="Australia and New Zealand",
        sub_region_code="053",
    ),
    Country(
        alpha2="NI",
        alpha3="NIC",
        capital="Managua",
        continent_name="North America",
        country_code="558",
        currency_code="NIO",
        intermediate_region="Central America",
        intermediate_region_code="013",
        iso31662="ISO 3166-2:NI",
        name="Nicaragua",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="NE",
        alpha3="NER",
        capital="Niamey",
        continent_name="Africa",
        country_code="562",
        currency_code="XOF",
        intermediate_region="Western Africa",
        intermediate_region_code="011",
        iso31662="ISO 3166-2:NE",
        name="Niger",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="NG",
        alpha3="NGA",
        capital="Abuja",
        continent_name="Africa",
        country_code="566",
        currency_code="NGN",
        intermediate_region="Western Africa",
        intermediate_region_code="011",
        iso31662="ISO 3166-2:NG",
        name="Nigeria",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="NU",
        alpha3="NIU",
        capital="Alofi",
        continent_name="Oceania",
        country_code="570",
        currency_code="NZD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:NU",
        name="Niue",
        region="Oceania",
        region_code="009",
        sub_region="Polynesia",
        sub_region_code="061",
    ),
    Country(
        alpha2="NF",
        alpha3="NFK",
        capital="Kingston",
        continent_name="Oceania",
        country_code="574",
        currency_code="AUD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:NF",
        name="Norfolk Island",
        region="Oceania",
        region_code="009",
        sub_region="Australia and New Zealand",
        sub_region_code="053",
    ),
    Country(
        alpha2="MK",
        alpha3="MKD",
        capital="Skopje",
        continent_name="Europe",
        country_code="807",
        currency_code="MKD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:MK",
        name="North Macedonia",
        region="Europe",
        region_code="150",
        sub_region="Southern Europe",
        sub_region_code="039",
    ),
    Country(
        alpha2="MP",
        alpha3="MNP",
        capital="Saipan",
        continent_name="Oceania",
        country_code="580",
        currency_code="USD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:MP",
        name="Northern Mariana Islands",
        region="Oceania",
        region_code="009",
        sub_region="Micronesia",
        sub_region_code="057",
    ),
    Country(
        alpha2="NO",
        alpha3="NOR",
        capital="Oslo",
        continent_name="Europe",
        country_code="578",
        currency_code="NOK",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:NO",
        name="Norway",
        region="Europe",
        region_code="150",
        sub_region="Northern Europe",
        sub_region_code="154",
    ),
    Country(
        alpha2="OM",
        alpha3="OMN",
        capital="Muscat",
        continent_name="Asia",
        country_code="512",
        currency_code="OMR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:OM",
        name="Oman",
        region="Asia",
        region_code="142",
        sub_region="Western Asia",
        sub_region_code="145",
    ),
    Country(
        alpha2="PK",
        alpha3="PAK",
        capital="Islamabad",
        continent_name="Asia",
        country_code="586",
        currency_code="PKR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:PK",
        name="Pakistan",
        region="Asia",
        region_code="142",
        sub_region="Southern Asia",
        sub_region_code="034",
    ),
    Country(
        alpha2="PW",
        alpha3="PLW",
        capital="Melekeok",
        continent_name="Oceania",
        country_code="585",
        currency_code="USD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:PW",
        name="Palau",
        region="Oceania",
        region_code="009",
        sub_region="Micronesia",
        sub_region_code="057",
    ),
    Country(
        alpha2="PS",
        alpha3="PSE",
        capital="",
        continent_name="Asia",
        country_code="275",
        currency_code="ILS",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:PS",
        name="Palestine, State of",
        region="Asia",
        region_code="142",
        sub_region="Western Asia",
        sub_region_code="145",
    ),
    Country(
        alpha2="PA",
        alpha3="PAN",
        capital="Panama City",
        continent_name="North America",
        country_code="591",
        currency_code="PAB",
        intermediate_region="Central America",
        intermediate_region_code="013",
        iso31662="ISO 3166-2:PA",
        name="Panama",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="PG",
        alpha3="PNG",
        capital="Port Moresby",
        continent_name="Oceania",
        country_code="598",
        currency_code="PGK",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:PG",
        name="Papua New Guinea",
        region="Oceania",
        region_code="009",
        sub_region="Melanesia",
        sub_region_code="054",
    ),
    Country(
        alpha2="PY",
        alpha3="PRY",
        capital="Asunción",
        continent_name="South America",
        country_code="600",
        currency_code="PYG",
        intermediate_region="South America",
        intermediate_region_code="005",
        iso31662="ISO 3166-2:PY",
        name="Paraguay",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="PE",
        alpha3="PER",
        capital="Lima",
        continent_name="South America",
        country_code="604",
        currency_code="PEN",
        intermediate_region="South America",
        intermediate_region_code="005",
        iso31662="ISO 3166-2:PE",
        name="Peru",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="PH",
        alpha3="PHL",
        capital="Manila",
        continent_name="Asia",
        country_code="608",
        currency_code="PHP",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:PH",
        name="Philippines",
        region="Asia",
        region_code="142",
        sub_region="South-eastern Asia",
        sub_region_code="035",
    ),
    Country(
        alpha2="PN",
        alpha3="PCN",
        capital="Adamstown",
        continent_name="Oceania",
        country_code="612",
        currency_code="NZD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:PN",
        name="Pitcairn",
        region="Oceania",
        region_code="009",
        sub_region="Polynesia",
        sub_region_code="061",
    ),
    Country(
        alpha2="PL",
        alpha3="POL",
        capital="Warsaw",
        continent_name="Europe",
        country_code="616",
        currency_code="PLN",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:PL",
        name="Poland",
        region="Europe",
        region_code="150",
        sub_region="Eastern Europe",
        sub_region_code="151",
    ),
    Country(
        alpha2="PT",
        alpha3="PRT",
        capital="Lisbon",
        continent_name="Europe",
        country_code="620",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:PT",
        name="Portugal",
        region="Europe",
        region_code="150",
        sub_region="Southern Europe",
        sub_region_code="039",
    ),
    Country(
        alpha2="PR",
        alpha3="PRI",
        capital="San Juan",
        continent_name="North America",
        country_code="630",
        currency_code="USD",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:PR",
        name="Puerto Rico",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="QA",
        alpha3="QAT",
        capital="Doha",
        continent_name="Asia",
        country_code="634",
        currency_code="QAR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:QA",
        name="Qatar",
        region="Asia",
        region_code="142",
        sub_region="Western Asia",
        sub_region_code="145",
    ),
    Country(
        alpha2="RE",
        alpha3="REU",
        capital="Saint-Denis",
        continent_name="Africa",
        country_code="638",
        currency_code="EUR",
        intermediate_region="Eastern Africa",
        intermediate_region_code="014",
        iso31662="ISO 3166-2:RE",
        name="Réunion",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="RO",
        alpha3="ROU",
        capital="Bucharest",
        continent_name="Europe",
        country_code="642",
        currency_code="RON",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:RO",
        name="Romania",
        region="Europe",
        region_code="150",
        sub_region="Eastern Europe",
        sub_region_code="151",
    ),
    Country(
        alpha2="RU",
        alpha3="RUS",
        capital="Moscow",
        continent_name="Europe",
        country_code="643",
        currency_code="RUB",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:RU",
        name="Russian Federation",
        region="Europe",
        region_code="150",
        sub_region="Eastern Europe",
        sub_region_code="151",
    ),
    Country(
        alpha2="RW",
        alpha3="RWA",
        capital="Kigali",
        continent_name="Africa",
        country_code="646",
        currency_code="RWF",
        intermediate_region="Eastern Africa",
        intermediate_region_code="014",
        iso31662="ISO 3166-2:RW",
        name="Rwanda",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="BL",
        alpha3="BLM",
        capital="Gustavia",
        continent_name="North America",
        country_code="652",
        currency_code="EUR",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:BL",
        name="Saint Barthélemy",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="SH",
        alpha3="SHN",
        capital="Jamestown",
        continent_name="Africa",
        country_code="654",
        currency_code="SHP",
        intermediate_region="Western Africa",
        intermediate_region_code="011",
        iso31662="ISO 3166-2:SH",
        name="Saint Helena, Ascension and Tristan da Cunha",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="KN",
        alpha3="KNA",
        capital="Basseterre",
        continent_name="North America",
        country_code="659",
        currency_code="XCD",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:KN",
        name="Saint Kitts and Nevis",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="LC",
        alpha3="LCA",
        capital="Castries",
        continent_name="North America",
        country_code="662",
        currency_code="XCD",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:LC",
        name="Saint Lucia",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="MF",
        alpha3="MAF",
        capital="Marigot",
        continent_name="North America",
        country_code="663",
        currency_code="EUR",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:MF",
        name="Saint Martin (French part)",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="PM",
        alpha3="SPM",
        capital="Saint-Pierre",
        continent_name="North America",
        country_code="666",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:PM",
        name="Saint Pierre and Miquelon",
        region="Americas",
        region_code="019",
        sub_region="Northern America",
        sub_region_code="021",
    ),
    Country(
        alpha2="VC",
        alpha3="VCT",
        capital="Kingstown",
        continent_name="North America",
        country_code="670",
        currency_code="XCD",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:VC",
        name="Saint Vincent and the Grenadines",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="WS",
        alpha3="WSM",
        capital="Apia",
        continent_name="Oceania",
        country_code="882",
        currency_code="WST",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:WS",
        name="Samoa",
        region="Oceania",
        region_code="009",
        sub_region="Polynesia",
        sub_region_code="061",
    ),
    Country(
        alpha2="SM",
        alpha3="SMR",
        capital="San Marino",
        continent_name="Europe",
        country_code="674",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:SM",
        name="San Marino",
        region="Europe",
        region_code="150",
        sub_region="Southern Europe",
        sub_region_code="039",
    ),
    Country(
        alpha2="ST",
        alpha3="STP",
        capital="São Tomé",
        continent_name="Africa",
        country_code="678",
        currency_code="STN",
        intermediate_region="Middle Africa",
        intermediate_region_code="017",
        iso31662="ISO 3166-2:ST",
        name="Sao Tome and Principe",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="SA",
        alpha3="SAU",
        capital="Riyadh",
        continent_name="Asia",
        country_code="682",
        currency_code="SAR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:SA",
        name="Saudi Arabia",
        region="Asia",
        region_code="142",
        sub_region="Western Asia",
        sub_region_code="145",
    ),
    Country(
        alpha2="SN",
        alpha3="SEN",
        capital="Dakar",
        continent_name="Africa",
        country_code="686",
        currency_code="XOF",
        intermediate_region="Western Africa",
        intermediate_region_code="011",
        iso31662="ISO 3166-2:SN",
        name="Senegal",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="RS",
        alpha3="SRB",
        capital="Belgrade",
        continent_name="Europe",
        country_code="688",
        currency_code="RSD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:RS",
        name="Serbia",
        region="Europe",
        region_code="150",
        sub_region="Southern Europe",
        sub_region_code="039",
    ),
    Country(
        alpha2="SC",
        alpha3="SYC",
        capital="Victoria",
        continent_name="Africa",
        country_code="690",
        currency_code="SCR",
        intermediate_region="Eastern Africa",
        intermediate_region_code="014",
        iso31662="ISO 3166-2:SC",
        name="Seychelles",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="SL",
        alpha3="SLE",
        capital="Freetown",
        continent_name="Africa",
        country_code="694",
        currency_code="SLE",
        intermediate_region="Western Africa",
        intermediate_region_code="011",
        iso31662="ISO 3166-2:SL",
        name="Sierra Leone",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="SG",
        alpha3="SGP",
        capital="Singapore",
        continent_name="Asia",
        country_code="702",
        currency_code="SGD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:SG",
        name="Singapore",
        region="Asia",
        region_code="142",
        sub_region="South-eastern Asia",
        sub_region_code="035",
    ),
    Country(
        alpha2="SX",
        alpha3="SXM",
        capital="Philipsburg",
        continent_name="North America",
        country_code="534",
        currency_code="ANG",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:SX",
        name="Sint Maarten (Dutch part)",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="SK",
        alpha3="SVK",
        capital="Bratislava",
        continent_name="Europe",
        country_code="703",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:SK",
        name="Slovakia",
        region="Europe",
        region_code="150",
        sub_region="Eastern Europe",
        sub_region_code="151",
    ),
    Country(
        alpha2="SI",
        alpha3="SVN",
        capital="Ljubljana",
        continent_name="Europe",
        country_code="705",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:SI",
        name="Slovenia",
        region="Europe",
        region_code="150",
        sub_region="Southern Europe",
        sub_region_code="039",
    ),
    Country(
        alpha2="SB",
        alpha3="SLB",
        capital="Honiara",
        continent_name="Oceania",
        country_code="090",
        currency_code="SBD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:SB",
        name="Solomon Islands",
        region="Oceania",
        region_code="009",
        sub_region="Melanesia",
        sub_region_code="054",
    ),
    Country(
        alpha2="SO",
        alpha3="SOM",
        capital="Mogadishu",
        continent_name="Africa",
        country_code="706",
        currency_code="SOS",
        intermediate_region="Eastern Africa",
        intermediate_region_code="014",
        iso31662="ISO 3166-2:SO",
        name="Somalia",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="ZA",
        alpha3="ZAF",
        capital="Pretoria",
        continent_name="Africa",
        country_code="710",
        currency_code="ZAR",
        intermediate_region="Southern Africa",
        intermediate_region_code="018",
        iso31662="ISO 3166-2:ZA",
        name="South Africa",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="GS",
        alpha3="SGS",
        capital="Grytviken",
        continent_name="Antarctica",
        country_code="239",
        currency_code="GBP",
        intermediate_region="South America",
        intermediate_region_code="005",
        iso31662="ISO 3166-2:GS",
        name="South Georgia and the South Sandwich Islands",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="SS",
        alpha3="SSD",
        capital="Juba",
        continent_name="Africa",
        country_code="728",
        currency_code="SSP",
        intermediate_region="Eastern Africa",
        intermediate_region_code="014",
        iso31662="ISO 3166-2:SS",
        name="South Sudan",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="ES",
        alpha3="ESP",
        capital="Madrid",
        continent_name="Europe",
        country_code="724",
        currency_code="EUR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:ES",
        name="Spain",
        region="Europe",
        region_code="150",
        sub_region="Southern Europe",
        sub_region_code="039",
    ),
    Country(
        alpha2="LK",
        alpha3="LKA",
        capital="Colombo",
        continent_name="Asia",
        country_code="144",
        currency_code="LKR",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:LK",
        name="Sri Lanka",
        region="Asia",
        region_code="142",
        sub_region="Southern Asia",
        sub_region_code="034",
    ),
    Country(
        alpha2="SD",
        alpha3="SDN",
        capital="Khartoum",
        continent_name="Africa",
        country_code="729",
        currency_code="SDG",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:SD",
        name="Sudan",
        region="Africa",
        region_code="002",
        sub_region="Northern Africa",
        sub_region_code="015",
    ),
    Country(
        alpha2="SR",
        alpha3="SUR",
        capital="Paramaribo",
        continent_name="South America",
        country_code="740",
        currency_code="SRD",
        intermediate_region="South America",
        intermediate_region_code="005",
        iso31662="ISO 3166-2:SR",
        name="Suriname",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="SJ",
        alpha3="SJM",
        capital="Longyearbyen",
        continent_name="Europe",
        country_code="744",
        currency_code="NOK",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:SJ",
        name="Svalbard and Jan Mayen",
        region="Europe",
        region_code="150",
        sub_region="Northern Europe",
        sub_region_code="154",
    ),
    Country(
        alpha2="SE",
        alpha3="SWE",
        capital="Stockholm",
        continent_name="Europe",
        country_code="752",
        currency_code="SEK",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:SE",
        name="Sweden",
        region="Europe",
        region_code="150",
        sub_region="Northern Europe",
        sub_region_code="154",
    ),
    Country(
        alpha2="CH",
        alpha3="CHE",
        capital="Bern",
        continent_name="Europe",
        country_code="756",
        currency_code="CHF",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:CH",
        name="Switzerland",
        region="Europe",
        region_code="150",
        sub_region="Western Europe",
        sub_region_code="155",
    ),
    Country(
        alpha2="SY",
        alpha3="SYR",
        capital="Damascus",
        continent_name="Asia",
        country_code="760",
        currency_code="SYP",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:SY",
        name="Syrian Arab Republic",
        region="Asia",
        region_code="142",
        sub_region="Western Asia",
        sub_region_code="145",
    ),
    Country(
        alpha2="TW",
        alpha3="TWN",
        capital="Taipei",
        continent_name="Asia",
        country_code="158",
        currency_code="TWD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:TW",
        name="Taiwan, Province of China",
        region="Asia",
        region_code="142",
        sub_region="Eastern Asia",
        sub_region_code="030",
    ),
    Country(
        alpha2="TJ",
        alpha3="TJK",
        capital="Dushanbe",
        continent_name="Asia",
        country_code="762",
        currency_code="TJS",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:TJ",
        name="Tajikistan",
        region="Asia",
        region_code="142",
        sub_region="Central Asia",
        sub_region_code="143",
    ),
    Country(
        alpha2="TZ",
        alpha3="TZA",
        capital="Dodoma",
        continent_name="Africa",
        country_code="834",
        currency_code="TZS",
        intermediate_region="Eastern Africa",
        intermediate_region_code="014",
        iso31662="ISO 3166-2:TZ",
        name="Tanzania, United Republic of",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="TH",
        alpha3="THA",
        capital="Bangkok",
        continent_name="Asia",
        country_code="764",
        currency_code="THB",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:TH",
        name="Thailand",
        region="Asia",
        region_code="142",
        sub_region="South-eastern Asia",
        sub_region_code="035",
    ),
    Country(
        alpha2="TL",
        alpha3="TLS",
        capital="Dili",
        continent_name="Oceania",
        country_code="626",
        currency_code="USD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:TL",
        name="Timor-Leste",
        region="Asia",
        region_code="142",
        sub_region="South-eastern Asia",
        sub_region_code="035",
    ),
    Country(
        alpha2="TG",
        alpha3="TGO",
        capital="Lomé",
        continent_name="Africa",
        country_code="768",
        currency_code="XOF",
        intermediate_region="Western Africa",
        intermediate_region_code="011",
        iso31662="ISO 3166-2:TG",
        name="Togo",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="TK",
        alpha3="TKL",
        capital="",
        continent_name="Oceania",
        country_code="772",
        currency_code="NZD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:TK",
        name="Tokelau",
        region="Oceania",
        region_code="009",
        sub_region="Polynesia",
        sub_region_code="061",
    ),
    Country(
        alpha2="TO",
        alpha3="TON",
        capital="Nuku'alofa",
        continent_name="Oceania",
        country_code="776",
        currency_code="TOP",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:TO",
        name="Tonga",
        region="Oceania",
        region_code="009",
        sub_region="Polynesia",
        sub_region_code="061",
    ),
    Country(
        alpha2="TT",
        alpha3="TTO",
        capital="Port of Spain",
        continent_name="North America",
        country_code="780",
        currency_code="TTD",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:TT",
        name="Trinidad and Tobago",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="TN",
        alpha3="TUN",
        capital="Tunis",
        continent_name="Africa",
        country_code="788",
        currency_code="TND",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:TN",
        name="Tunisia",
        region="Africa",
        region_code="002",
        sub_region="Northern Africa",
        sub_region_code="015",
    ),
    Country(
        alpha2="TR",
        alpha3="TUR",
        capital="Ankara",
        continent_name="Asia",
        country_code="792",
        currency_code="TRY",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:TR",
        name="Türkiye",
        region="Asia",
        region_code="142",
        sub_region="Western Asia",
        sub_region_code="145",
    ),
    Country(
        alpha2="TM",
        alpha3="TKM",
        capital="Ashgabat",
        continent_name="Asia",
        country_code="795",
        currency_code="TMT",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:TM",
        name="Turkmenistan",
        region="Asia",
        region_code="142",
        sub_region="Central Asia",
        sub_region_code="143",
    ),
    Country(
        alpha2="TC",
        alpha3="TCA",
        capital="Cockburn Town",
        continent_name="North America",
        country_code="796",
        currency_code="USD",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:TC",
        name="Turks and Caicos Islands",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="TV",
        alpha3="TUV",
        capital="Funafuti",
        continent_name="Oceania",
        country_code="798",
        currency_code="AUD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:TV",
        name="Tuvalu",
        region="Oceania",
        region_code="009",
        sub_region="Polynesia",
        sub_region_code="061",
    ),
    Country(
        alpha2="UG",
        alpha3="UGA",
        capital="Kampala",
        continent_name="Africa",
        country_code="800",
        currency_code="UGX",
        intermediate_region="Eastern Africa",
        intermediate_region_code="014",
        iso31662="ISO 3166-2:UG",
        name="Uganda",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="UA",
        alpha3="UKR",
        capital="Kyiv",
        continent_name="Europe",
        country_code="804",
        currency_code="UAH",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:UA",
        name="Ukraine",
        region="Europe",
        region_code="150",
        sub_region="Eastern Europe",
        sub_region_code="151",
    ),
    Country(
        alpha2="AE",
        alpha3="ARE",
        capital="Abu Dhabi",
        continent_name="Asia",
        country_code="784",
        currency_code="AED",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:AE",
        name="United Arab Emirates",
        region="Asia",
        region_code="142",
        sub_region="Western Asia",
        sub_region_code="145",
    ),
    Country(
        alpha2="GB",
        alpha3="GBR",
        capital="London",
        continent_name="Europe",
        country_code="826",
        currency_code="GBP",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:GB",
        name="United Kingdom of Great Britain and Northern Ireland",
        region="Europe",
        region_code="150",
        sub_region="Northern Europe",
        sub_region_code="154",
    ),
    Country(
        alpha2="US",
        alpha3="USA",
        capital="Washington",
        continent_name="North America",
        country_code="840",
        currency_code="USD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:US",
        name="United States of America",
        region="Americas",
        region_code="019",
        sub_region="Northern America",
        sub_region_code="021",
    ),
    Country(
        alpha2="UM",
        alpha3="UMI",
        capital="",
        continent_name="Oceania",
        country_code="581",
        currency_code="USD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:UM",
        name="United States Minor Outlying Islands",
        region="Oceania",
        region_code="009",
        sub_region="Micronesia",
        sub_region_code="057",
    ),
    Country(
        alpha2="UY",
        alpha3="URY",
        capital="Montevideo",
        continent_name="South America",
        country_code="858",
        currency_code="UYU",
        intermediate_region="South America",
        intermediate_region_code="005",
        iso31662="ISO 3166-2:UY",
        name="Uruguay",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="UZ",
        alpha3="UZB",
        capital="Tashkent",
        continent_name="Asia",
        country_code="860",
        currency_code="UZS",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:UZ",
        name="Uzbekistan",
        region="Asia",
        region_code="142",
        sub_region="Central Asia",
        sub_region_code="143",
    ),
    Country(
        alpha2="VU",
        alpha3="VUT",
        capital="Port Vila",
        continent_name="Oceania",
        country_code="548",
        currency_code="VUV",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:VU",
        name="Vanuatu",
        region="Oceania",
        region_code="009",
        sub_region="Melanesia",
        sub_region_code="054",
    ),
    Country(
        alpha2="VE",
        alpha3="VEN",
        capital="Caracas",
        continent_name="South America",
        country_code="862",
        currency_code="VES",
        intermediate_region="South America",
        intermediate_region_code="005",
        iso31662="ISO 3166-2:VE",
        name="Venezuela (Bolivarian Republic of)",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="VN",
        alpha3="VNM",
        capital="Hanoi",
        continent_name="Asia",
        country_code="704",
        currency_code="VND",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:VN",
        name="Viet Nam",
        region="Asia",
        region_code="142",
        sub_region="South-eastern Asia",
        sub_region_code="035",
    ),
    Country(
        alpha2="VG",
        alpha3="VGB",
        capital="Road Town",
        continent_name="North America",
        country_code="092",
        currency_code="USD",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:VG",
        name="Virgin Islands (British)",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="VI",
        alpha3="VIR",
        capital="Charlotte Amalie",
        continent_name="North America",
        country_code="850",
        currency_code="USD",
        intermediate_region="Caribbean",
        intermediate_region_code="029",
        iso31662="ISO 3166-2:VI",
        name="Virgin Islands (U.S.)",
        region="Americas",
        region_code="019",
        sub_region="Latin America and the Caribbean",
        sub_region_code="419",
    ),
    Country(
        alpha2="WF",
        alpha3="WLF",
        capital="Mata-Utu",
        continent_name="Oceania",
        country_code="876",
        currency_code="XPF",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:WF",
        name="Wallis and Futuna",
        region="Oceania",
        region_code="009",
        sub_region="Polynesia",
        sub_region_code="061",
    ),
    Country(
        alpha2="EH",
        alpha3="ESH",
        capital="Laayoune",
        continent_name="Africa",
        country_code="732",
        currency_code="MAD",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:EH",
        name="Western Sahara",
        region="Africa",
        region_code="002",
        sub_region="Northern Africa",
        sub_region_code="015",
    ),
    Country(
        alpha2="YE",
        alpha3="YEM",
        capital="Sanaa",
        continent_name="Asia",
        country_code="887",
        currency_code="YER",
        intermediate_region="",
        intermediate_region_code="",
        iso31662="ISO 3166-2:YE",
        name="Yemen",
        region="Asia",
        region_code="142",
        sub_region="Western Asia",
        sub_region_code="145",
    ),
    Country(
        alpha2="ZM",
        alpha3="ZMB",
        capital="Lusaka",
        continent_name="Africa",
        country_code="894",
        currency_code="ZMW",
        intermediate_region="Eastern Africa",
        intermediate_region_code="014",
        iso31662="ISO 3166-2:ZM",
        name="Zambia",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
    Country(
        alpha2="ZW",
        alpha3="ZWE",
        capital="Harare",
        continent_name="Africa",
        country_code="716",
        currency_code="ZWL",
        intermediate_region="Eastern Africa",
        intermediate_region_code="014",
        iso31662="ISO 3166-2:ZW",
        name="Zimbabwe",
        region="Africa",
        region_code="002",
        sub_region="Sub-Saharan Africa",
        sub_region_code="202",
    ),
)

# Lookup indices: normalized key -> position in COUNTRIES.
BY_NAME: dict[str, int] = {
    "afghanistan": 0,
    "åland islands": 1,
    "albania": 2,
    "algeria": 3,
    "american samoa": 4,
    "andorra": 5,
    "angola": 6,
    "anguilla": 7,
    "antarctica": 8,
    "antigua and barbuda": 9,
    "argentina": 10,
    "armenia": 11,
    "aruba": 12,
    "australia": 13,
    "austria": 14,
    "azerbaijan": 15,
    "bahamas": 16,
    "bahrain": 17,
    "bangladesh": 18,
    "barbados": 19,
    "belarus": 20,
    "belgium": 21,
    "belize": 22,
    "benin": 23,
    "bermuda": 24,
    "bhutan": 25,
    "bolivia (plurinational state of)": 26,
    "bonaire, sint eustatius and saba": 27,
    "bosnia and herzegovina": 28,
    "botswana": 29,
    "bouvet island": 30,
    "brazil": 31,
    "british indian ocean territory": 32,
    "brunei darussalam": 33,
    "bulgaria": 34,
    "burkina faso": 35,
    "burundi": 36,
    "cabo verde": 37,
    "cambodia": 38,
    "cameroon": 39,
    "canada": 40,
    "cayman islands": 41,
    "central african republic": 42,
    "chad": 43,
    "chile": 44,
    "china": 45,
    "christmas island": 46,
    "cocos (keeling) islands": 47,
    "colombia": 48,
    "comoros": 49,
    "congo": 50,
    "congo, democratic republic of the": 51,
    "cook islands": 52,
    "costa rica": 53,
    "côte d'ivoire": 54,
    "croatia": 55,
    "cuba": 56,
    "curaçao": 57,
    "cyprus": 58,
    "czechia": 59,
    "denmark": 60,
    "djibouti": 61,
    "dominica": 62,
    "dominican republic": 63,
    "ecuador": 64,
    "egypt": 65,
    "el salvador": 66,
    "equatorial guinea": 67,
    "eritrea": 68,
    "estonia": 69,
    "eswatini": 70,
    "ethiopia": 71,
    "falkland islands (malvinas)": 72,
    "faroe islands": 73,
    "fiji": 74,
    "finland": 75,
    "france": 76,
    "french guiana": 77,
    "french polynesia": 78,
    "french southern territories": 79,
    "gabon": 80,
    "gambia": 81,
    "georgia": 82,
    "germany": 83,
    "ghana": 84,
    "gibraltar": 85,
    "greece": 86,
    "greenland": 87,
    "grenada": 88,
    "guadeloupe": 89,
    "guam": 90,
    "guatemala": 91,
    "guernsey": 92,
    "guinea": 93,
    "guinea-bissau": 94,
    "guyana": 95,
    "haiti": 96,
    "heard island and mcdonald islands": 97,
    "holy see": 98,
    "honduras": 99,
    "hong kong": 100,
    "hungary": 101,
    "iceland": 102,
    "india": 103,
    "indonesia": 104,
    "iran (islamic republic of)": 105,
    "iraq": 106,
    "ireland": 107,
    "isle of man": 108,
    "israel": 109,
    "italy": 110,
    "jamaica": 111,
    "japan": 112,
    "jersey": 113,
    "jordan": 114,
    "kazakhstan": 115,
    "kenya": 116,
    "kiribati": 117,
    "korea (democratic people's republic of)": 118,
    "korea, republic of": 119,
    "kuwait": 120,
    "kyrgyzstan": 121,
    "lao people's democratic republic": 122,
    "latvia": 123,
    "lebanon": 124,
    "lesotho": 125,
    "liberia": 126,
    "libya": 127,
    "liechtenstein": 128,
    "lithuania": 129,
    "luxembourg": 130,
    "macao": 131,
    "madagascar": 132,
    "malawi": 133,
    "malaysia": 134,
    "maldives": 135,
    "mali": 136,
    "malta": 137,
    "marshall islands": 138,
    "martinique": 139,
    "mauritania": 140,
    "mauritius": 141,
    "mayotte": 142,
    "mexico": 143,
    "micronesia (federated states of)": 144,
    "moldova, republic of": 145,
    "monaco": 146,
    "mongolia": 147,
    "montenegro": 148,
    "montserrat": 149,
    "morocco": 150,
    "mozambique": 151,
    "myanmar": 152,
    "namibia": 153,
    "nauru": 154,
    "nepal": 155,
    "netherlands, kingdom of the": 156,
    "new caledonia": 157,
    "new zealand": 158,
    "nicaragua": 159,
    "niger": 160,
    "nigeria": 161,
    "niue": 162,
    "norfolk island": 163,
    "north macedonia": 164,
    "northern mariana islands": 165,
    "norway": 166,
    "oman": 167,
    "pakistan": 168,
    "palau": 169,
    "palestine, state of": 170,
    "panama": 171,
    "papua new guinea": 172,
    "paraguay": 173,
    "peru": 174,
    "philippines": 175,
    "pitcairn": 176,
    "poland": 177,
    "portugal": 178,
    "puerto rico": 179,
    "qatar": 180,
    "réunion": 181,
    "romania": 182,
    "russian federation": 183,
    "rwanda": 184,
    "saint barthélemy": 185,
    "saint helena, ascension and tristan da cunha": 186,
    "saint kitts and nevis": 187,
    "saint lucia": 188,
    "saint martin (french part)": 189,
    "saint pierre and miquelon": 190,
    "saint vincent and the grenadines": 191,
    "samoa": 192,
    "san marino": 193,
    "sao tome and principe": 194,
    "saudi arabia": 195,
    "senegal": 196,
    "serbia": 197,
    "seychelles": 198,
    "sierra leone": 199,
    "singapore": 200,
    "sint maarten (dutch part)": 201,
    "slovakia": 202,
    "slovenia": 203,
    "solomon islands": 204,
    "somalia": 205,
    "south africa": 206,
    "south georgia and the south sandwich islands": 207,
    "south sudan": 208,
    "spain": 209,
    "sri lanka": 210,
    "sudan": 211,
    "suriname": 212,
    "svalbard and jan mayen": 213,
    "sweden": 214,
    "switzerland": 215,
    "syrian arab republic": 216,
    "taiwan, province of china": 217,
    "tajikistan": 218,
    "tanzania, united republic of": 219,
    "thailand": 220,
    "timor-leste": 221,
    "togo": 222,
    "tokelau": 223,
    "tonga": 224,
    "trinidad and tobago": 225,
    "tunisia": 226,
    "türkiye": 227,
    "turkmenistan": 228,
    "turks and caicos islands": 229,
    "tuvalu": 230,
    "uganda": 231,
    "ukraine": 232,
    "united arab emirates": 233,
    "united kingdom of great britain and northern ireland": 234,
    "united states of america": 235,
    "united states minor outlying islands": 236,
    "uruguay": 237,
    "uzbekistan": 238,
    "vanuatu": 239,
    "venezuela (bolivarian republic of)": 240,
    "viet nam": 241,
    "virgin islands (british)": 242,
    "virgin islands (u.s.)": 243,
    "wallis and futuna": 244,
    "western sahara": 245,
    "yemen": 246,
    "zambia": 247,
    "zimbabwe": 248,
}

BY_ALPHA2: dict[str, int] = {
    "AF": 0,
    "AX": 1,
    "AL": 2,
    "DZ": 3,
    "AS": 4,
    "AD": 5,
    "AO": 6,
    "AI": 7,
    "AQ": 8,
    "AG": 9,
    "AR": 10,
    "AM": 11,
    "AW": 12,
    "AU": 13,
    "AT": 14,
    "AZ": 15,
    "BS": 16,
    "BH": 17,
    "BD": 18,
    "BB": 19,
    "BY": 20,
    "BE": 21,
    "BZ": 22,
    "BJ": 23,
    "BM": 24,
    "BT": 25,
    "BO": 26,
    "BQ": 27,
    "BA": 28,
    "BW": 29,
    "BV": 30,
    "BR": 31,
    "IO": 32,
    "BN": 33,
    "BG": 34,
    "BF": 35,
    "BI": 36,
    "CV": 37,
    "KH": 38,
    "CM": 39,
    "CA": 40,
    "KY": 41,
    "CF": 42,
    "TD": 43,
    "CL": 44,
    "CN": 45,
    "CX": 46,
    "CC": 47,
    "CO": 48,
    "KM": 49,
    "CG": 50,
    "CD": 51,
    "CK": 52,
    "CR": 53,
    "CI": 54,
    "HR": 55,
    "CU": 56,
    "CW": 57,
    "CY": 58,
    "CZ": 59,
    "DK": 60,
    "DJ": 61,
    "DM": 62,
    "DO": 63,
    "EC": 64,
    "EG": 65,
    "SV": 66,
    "GQ": 67,
    "ER": 68,
    "EE": 69,
    "SZ": 70,
    "ET": 71,
    "FK": 72,
    "FO": 73,
    "FJ": 74,
    "FI": 75,
    "FR": 76,
    "GF": 77,
    "PF": 78,
    "TF": 79,
    "GA": 80,
    "GM": 81,
    "GE": 82,
    "DE": 83,
    "GH": 84,
    "GI": 85,
    "GR": 86,
    "GL": 87,
    "GD": 88,
    "GP": 89,
    "GU": 90,
    "GT": 91,
    "GG": 92,
    "GN": 93,
    "GW": 94,
    "GY": 95,
    "HT": 96,
    "HM": 97,
    "VA": 98,
    "HN": 99,
    "HK": 100,
    "HU": 101,
    "IS": 102,
    "IN": 103,
    "ID": 104,
    "IR": 105,
    "IQ": 106,
    "IE": 107,
    "IM": 108,
    "IL": 109,
    "IT": 110,
    "JM": 111,
    "JP": 112,
    "JE": 113,
    "JO": 114,
    "KZ": 115,
    "KE": 116,
    "KI": 117,
    "KP": 118,
    "KR": 119,
    "KW": 120,
    "KG": 121,
    "LA": 122,
    "LV": 123,
    "LB": 124,
    "LS": 125,
    "LR": 126,
    "LY": 127,
    "LI": 128,
    "LT": 129,
    "LU": 130,
    "MO": 131,
    "MG": 132,
    "MW": 133,
    "MY": 134,
    "MV": 135,
    "ML": 136,
    "MT": 137,
    "MH": 138,
    "MQ": 139,
    "MR": 140,
    "MU": 141,
    "YT": 142,
    "MX": 143,
    "FM": 144,
    "MD": 145,
    "MC": 146,
    "MN": 147,
    "ME": 148,
    "MS": 149,
    "MA": 150,
    "MZ": 151,
    "MM": 152,
    "NA": 153,
    "NR": 154,
    "NP": 155,
    "NL": 156,
    "NC": 157,
    "NZ": 158,
    "NI": 159,
    "NE": 160,
    "NG": 161,
    "NU": 162,
    "NF": 163,
    "MK": 164,
    "MP": 165,
    "NO": 166,
    "OM": 167,
    "PK": 168,
    "PW": 169,
    "PS": 170,
    "PA": 171,
    "PG": 172,
    "PY": 173,
    "PE": 174,
    "PH": 175,
    "PN": 176,
    "PL": 177,
    "PT": 178,
    "PR": 179,
    "QA": 180,
    "RE": 181,
    "RO": 182,
    "RU": 183,
    "RW": 184,
    "BL": 185,
    "SH": 186,
    "KN": 187,
    "LC": 188,
    "MF": 189,
    "PM": 190,
    "VC": 191,
    "WS": 192,
    "SM": 193,
    "ST": 194,
    "SA": 195,
    "SN": 196,
    "RS": 197,
    "SC": 198,
    "SL": 199,
    "SG": 200,
    "SX": 201,
    "SK": 202,
    "SI": 203,
    "SB": 204,
    "SO": 205,
    "ZA": 206,
    "GS": 207,
    "SS": 208,
    "ES": 209,
    "LK": 210,
    "SD": 211,
    "SR": 212,
    "SJ": 213,
    "SE": 214,
    "CH": 215,
    "SY": 216,
    "TW": 217,
    "TJ": 218,
    "TZ": 219,
    "TH": 220,
    "TL": 221,
    "TG": 222,
    "TK": 223,
    "TO": 224,
    "TT": 225,
    "TN": 226,
    "TR": 227,
    "TM": 228,
    "TC": 229,
    "TV": 230,
    "UG": 231,
    "UA": 232,
    "AE": 233,
    "GB": 234,
    "US": 235,
    "UM": 236,
    "UY": 237,
    "UZ": 238,
    "VU": 239,
    "VE": 240,
    "VN": 241,
    "VG": 242,
    "VI": 243,
    "WF": 244,
    "EH": 245,
    "YE": 246,
    "ZM": 247,
    "ZW": 248,
}

BY_ALPHA3: dict[str, int] = {
    "AFG": 0,
    "ALA": 1,
    "ALB": 2,
    "DZA": 3,
    "ASM": 4,
    "AND": 5,
    "AGO": 6,
    "AIA": 7,
    "ATA": 8,
    "ATG": 9,
    "ARG": 10,
    "ARM": 11,
    "ABW": 12,
    "AUS": 13,
    "AUT": 14,
    "AZE": 15,
    "BHS": 16,
    "BHR": 17,
    "BGD": 18,
    "BRB": 19,
    "BLR": 20,
    "BEL": 21,
    "BLZ": 22,
    "BEN": 23,
    "BMU": 24,
    "BTN": 25,
    "BOL": 26,
    "BES": 27,
    "BIH": 28,
    "BWA": 29,
    "BVT": 30,
    "BRA": 31,
    "IOT": 32,
    "BRN": 33,
    "BGR": 34,
    "BFA": 35,
    "BDI": 36,
    "CPV": 37,
    "KHM": 38,
    "CMR": 39,
    "CAN": 40,
    "CYM": 41,
    "CAF": 42,
    "TCD": 43,
    "CHL": 44,
    "CHN": 45,
    "CXR": 46,
    "CCK": 47,
    "COL": 48,
    "COM": 49,
    "COG": 50,
    "COD": 51,
    "COK": 52,
    "CRI": 53,
    "CIV": 54,
    "HRV": 55,
    "CUB": 56,
    "CUW": 57,
    "CYP": 58,
    "CZE": 59,
    "DNK": 60,
    "DJI": 61,
    "DMA": 62,
    "DOM": 63,
    "ECU": 64,
    "EGY": 65,
    "SLV": 66,
    "GNQ": 67,
    "ERI": 68,
    "EST": 69,
    "SWZ": 70,
    "ETH": 71,
    "FLK": 72,
    "FRO": 73,
    "FJI": 74,
    "FIN": 75,
    "FRA": 76,
    "GUF": 77,
    "PYF": 78,
    "ATF": 79,
    "GAB": 80,
    "GMB": 81,
    "GEO": 82,
    "DEU": 83,
    "GHA": 84,
    "GIB": 85,
    "GRC": 86,
    "GRL": 87,
    "GRD": 88,
    "GLP": 89,
    "GUM": 90,
    "GTM": 91,
    "GGY": 92,
    "GIN": 93,
    "GNB": 94,
    "GUY": 95,
    "HTI": 96,
    "HMD": 97,
    "VAT": 98,
    "HND": 99,
    "HKG": 100,
    "HUN": 101,
    "ISL": 102,
    "IND": 103,
    "IDN": 104,
    "IRN": 105,
    "IRQ": 106,
    "IRL": 107,
    "IMN": 108,
    "ISR": 109,
    "ITA": 110,
    "JAM": 111,
    "JPN": 112,
    "JEY": 113,
    "JOR": 114,
    "KAZ": 115,
    "KEN": 116,
    "KIR": 117,
    "PRK": 118,
    "KOR": 119,
    "KWT": 120,
    "KGZ": 121,
    "LAO": 122,
    "LVA": 123,
    "LBN": 124,
    "LSO": 125,
    "LBR": 126,
    "LBY": 127,
    "LIE": 128,
    "LTU": 129,
    "LUX": 130,
    "MAC": 131,
    "MDG": 132,
    "MWI": 133,
    "MYS": 134,
    "MDV": 135,
    "MLI": 136,
    "MLT": 137,
    "MHL": 138,
    "MTQ": 139,
    "MRT": 140,
    "MUS": 141,
    "MYT": 142,
    "MEX": 143,
    "FSM": 144,
    "MDA": 145,
    "MCO": 146,
    "MNG": 147,
    "MNE": 148,
    "MSR": 149,
    "MAR": 150,
    "MOZ": 151,
    "MMR": 152,
    "NAM": 153,
    "NRU": 154,
    "NPL": 155,
    "NLD": 156,
    "NCL": 157,
    "NZL": 158,
    "NIC": 159,
    "NER": 160,
    "NGA": 161,
    "NIU": 162,
    "NFK": 163,
    "MKD": 164,
    "MNP": 165,
    "NOR": 166,
    "OMN": 167,
    "PAK": 168,
    "PLW": 169,
    "PSE": 170,
    "PAN": 171,
    "PNG": 172,
    "PRY": 173,
    "PER": 174,
    "PHL": 175,
    "PCN": 176,
    "POL": 177,
    "PRT": 178,
    "PRI": 179,
    "QAT": 180,
    "REU": 181,
    "ROU": 182,
    "RUS": 183,
    "RWA": 184,
    "BLM": 185,
    "SHN": 186,
    "KNA": 187,
    "LCA": 188,
    "MAF": 189,
    "SPM": 190,
    "VCT": 191,
    "WSM": 192,
    "SMR": 193,
    "STP": 194,
    "SAU": 195,
    "SEN": 196,
    "SRB": 197,
    "SYC": 198,
    "SLE": 199,
    "SGP": 200,
    "SXM": 201,
    "SVK": 202,
    "SVN": 203,
    "SLB": 204,
    "SOM": 205,
    "ZAF": 206,
    "SGS": 207,
    "SSD": 208,
    "ESP": 209,
    "LKA": 210,
    "SDN": 211,
    "SUR": 212,
    "SJM": 213,
    "SWE": 214,
    "CHE": 215,
    "SYR": 216,
    "TWN": 217,
    "TJK": 218,
    "TZA": 219,
    "THA": 220,
    "TLS": 221,
    "TGO": 222,
    "TKL": 223,
    "TON": 224,
    "TTO": 225,
    "TUN": 226,
    "TUR": 227,
    "TKM": 228,
    "TCA": 229,
    "TUV": 230,
    "UGA": 231,
    "UKR": 232,
    "ARE": 233,
    "GBR": 234,
    "USA": 235,
    "UMI": 236,
    "URY": 237,
    "UZB": 238,
    "VUT": 239,
    "VEN": 240,
    "VNM": 241,
    "VGB": 242,
    "VIR": 243,
    "WLF": 244,
    "ESH": 245,
    "YEM": 246,
    "ZMB": 247,
    "ZWE": 248,
}

BY_COUNTRY_CODE: dict[str, int] = {
    "004": 0,
    "248": 1,
    "008": 2,
    "012": 3,
    "016": 4,
    "020": 5,
    "024": 6,
    "660": 7,
    "010": 8,
    "028": 9,
    "032": 10,
    "051": 11,
    "533": 12,
    "036": 13,
    "040": 14,
    "031": 15,
    "044": 16,
    "048": 17,
    "050": 18,
    "052": 19,
    "112": 20,
    "056": 21,
    "084": 22,
    "204": 23,
    "060": 24,
    "064": 25,
    "068": 26,
    "535": 27,
    "070": 28,
    "072": 29,
    "074": 30,
    "076": 31,
    "086": 32,
    "096": 33,
    "100": 34,
    "854": 35,
    "108": 36,
    "132": 37,
    "116": 38,
    "120": 39,
    "124": 40,
    "136": 41,
    "140": 42,
    "148": 43,
    "152": 44,
    "156": 45,
    "162": 46,
    "166": 47,
    "170": 48,
    "174": 49,
    "178": 50,
    "180": 51,
    "184": 52,
    "188": 53,
    "384": 54,
    "191": 55,
    "192": 56,
    "531": 57,
    "196": 58,
    "203": 59,
    "208": 60,
    "262": 61,
    "212": 62,
    "214": 63,
    "218": 64,
    "818": 65,
    "222": 66,
    "226": 67,
    "232": 68,
    "233": 69,
    "748": 70,
    "231": 71,
    "238": 72,
    "234": 73,
    "242": 74,
    "246": 75,
    "250": 76,
    "254": 77,
    "258": 78,
    "260": 79,
    "266": 80,
    "270": 81,
    "268": 82,
    "276": 83,
    "288": 84,
    "292": 85,
    "300": 86,
    "304": 87,
    "308": 88,
    "312": 89,
    "316": 90,
    "320": 91,
    "831": 92,
    "324": 93,
    "624": 94,
    "328": 95,
    "332": 96,
    "334": 97,
    "336": 98,
    "340": 99,
    "344": 100,
    "348": 101,
    "352": 102,
    "356": 103,
    "360": 104,
    "364": 105,
    "368": 106,
    "372": 107,
    "833": 108,
    "376": 109,
    "380": 110,
    "388": 111,
    "392": 112,
    "832": 113,
    "400": 114,
    "398": 115,
    "404": 116,
    "296": 117,
    "408": 118,
    "410": 119,
    "414": 120,
    "417": 121,
    "418": 122,
    "428": 123,
    "422": 124,
    "426": 125,
    "430": 126,
    "434": 127,
    "438": 128,
    "440": 129,
    "442": 130,
    "446": 131,
    "450": 132,
    "454": 133,
    "458": 134,
    "462": 135,
    "466": 136,
    "470": 137,
    "584": 138,
    "474": 139,
    "478": 140,
    "480": 141,
    "175": 142,
    "484": 143,
    "583": 144,
    "498": 145,
    "492": 146,
    "496": 147,
    "499": 148,
    "500": 149,
    "504": 150,
    "508": 151,
    "104": 152,
    "516": 153,
    "520": 154,
    "524": 155,
    "528": 156,
    "540": 157,
    "554": 158,
    "558": 159,
    "562": 160,
    "566": 161,
    "570": 162,
    "574": 163,
    "807": 164,
    "580": 165,
    "578": 166,
    "512": 167,
    "586": 168,
    "585": 169,
    "275": 170,
    "591": 171,
    "598": 172,
    "600": 173,
    "604": 174,
    "608": 175,
    "612": 176,
    "616": 177,
    "620": 178,
    "630": 179,
    "634": 180,
    "638": 181,
    "642": 182,
    "643": 183,
    "646": 184,
    "652": 185,
    "654": 186,
    "659": 187,
    "662": 188,
    "663": 189,
    "666": 190,
    "670": 191,
    "882": 192,
    "674": 193,
    "678": 194,
    "682": 195,
    "686": 196,
    "688": 197,
    "690": 198,
    "694": 199,
    "702": 200,
    "534": 201,
    "703": 202,
    "705": 203,
    "090": 204,
    "706": 205,
    "710": 206,
    "239": 207,
    "728": 208,
    "724": 209,
    "144": 210,
    "729": 211,
    "740": 212,
    "744": 213,
    "752": 214,
    "756": 215,
    "760": 216,
    "158": 217,
    "762": 218,
    "834": 219,
    "764": 220,
    "626": 221,
    "768": 222,
    "772": 223,
    "776": 224,
    "780": 225,
    "788": 226,
    "792": 227,
    "795": 228,
    "796": 229,
    "798": 230,
    "800": 231,
    "804": 232,
    "784": 233,
    "826": 234,
    "840": 235,
    "581": 236,
    "858": 237,
    "860": 238,
    "548": 239,
    "862": 240,
    "704": 241,
    "092": 242,
    "850": 243,
    "876": 244,
    "732": 245,
    "887": 246,
    "894": 247,
    "716": 248,
}

BY_ISO31662: dict[str, int] = {
    "ISO 3166-2:AF": 0,
    "ISO 3166-2:AX": 1,
    "ISO 3166-2:AL": 2,
    "ISO 3166-2:DZ": 3,
    "ISO 3166-2:AS": 4,
    "ISO 3166-2:AD": 5,
    "ISO 3166-2:AO": 6,
    "ISO 3166-2:AI": 7,
    "ISO 3166-2:AQ": 8,
    "ISO 3166-2:AG": 9,
    "ISO 3166-2:AR": 10,
    "ISO 3166-2:AM": 11,
    "ISO 3166-2:AW": 12,
    "ISO 3166-2:AU": 13,
    "ISO 3166-2:AT": 14,
    "ISO 3166-2:AZ": 15,
    "ISO 3166-2:BS": 16,
    "ISO 3166-2:BH": 17,
    "ISO 3166-2:BD": 18,
    "ISO 3166-2:BB": 19,
    "ISO 3166-2:BY": 20,
    "ISO 3166-2:BE": 21,
    "ISO 3166-2:BZ": 22,
    "ISO 3166-2:BJ": 23,
    "ISO 3166-2:BM": 24,
    "ISO 3166-2:BT": 25,
    "ISO 3166-2:BO": 26,
    "ISO 3166-2:BQ": 27,
    "ISO 3166-2:BA": 28,
    "ISO 3166-2:BW": 29,
    "ISO 3166-2:BV": 30,
    "ISO 3166-2:BR": 31,
    "ISO 3166-2:IO": 32,
    "ISO 3166-2:BN": 33,
    "ISO 3166-2:BG": 34,
    "ISO 3166-2:BF": 35,
    "ISO 3166-2:BI": 36,
    "ISO 3166-2:CV": 37,
    "ISO 3166-2:KH": 38,
    "ISO 3166-2:CM": 39,
    "ISO 3166-2:CA": 40,
    "ISO 3166-2:KY": 41,
    "ISO 3166-2:CF": 42,
    "ISO 3166-2:TD": 43,
    "ISO 3166-2:CL": 44,
    "ISO 3166-2:CN": 45,
    "ISO 3166-2:CX": 46,
    "ISO 3166-2:CC": 47,
    "ISO 3166-2:CO": 48,
    "ISO 3166-2:KM": 49,
    "ISO 3166-2:CG": 50,
    "ISO 3166-2:CD": 51,
    "ISO 3166-2:CK": 52,
    "ISO 3166-2:CR": 53,
    "ISO 3166-2:CI": 54,
    "ISO 3166-2:HR": 55,
    "ISO 3166-2:CU": 56,
    "ISO 3166-2:CW": 57,
    "ISO 3166-2:CY": 58,
    "ISO 3166-2:CZ": 59,
    "ISO 3166-2:DK": 60,
    "ISO 3166-2:DJ": 61,
    "ISO 3166-2:DM": 62,
    "ISO 3166-2:DO": 63,
    "ISO 3166-2:EC": 64,
    "ISO 3166-2:EG": 65,
    "ISO 3166-2:SV": 66,
    "ISO 3166-2:GQ": 67,
    "ISO 3166-2:ER": 68,
    "ISO 3166-2:EE": 69,
    "ISO 3166-2:SZ": 70,
    "ISO 3166-2:ET": 71,
    "ISO 3166-2:FK": 72,
    "ISO 3166-2:FO": 73,
    "ISO 3166-2:FJ": 74,
    "ISO 3166-2:FI": 75,
    "ISO 3166-2:FR": 76,
    "ISO 3166-2:GF": 77,
    "ISO 3166-2:PF": 78,
    "ISO 3166-2:TF": 79,
    "ISO 3166-2:GA": 80,
    "ISO 3166-2:GM": 81,
    "ISO 3166-2:GE": 82,
    "ISO 3166-2:DE": 83,
    "ISO 3166-2:GH": 84,
    "ISO 3166-2:GI": 85,
    "ISO 3166-2:GR": 86,
    "ISO 3166-2:GL": 87,
    "ISO 3166-2:GD": 88,
    "ISO 3166-2:GP": 89,
    "ISO 3166-2:GU": 90,
    "ISO 3166-2:GT": 91,
    "ISO 3166-2:GG": 92,
    "ISO 3166-2:GN": 93,
    "ISO 3166-2:GW": 94,
    "ISO 3166-2:GY": 95,
    "ISO 3166-2:HT": 96,
    "ISO 3166-2:HM": 97,
    "ISO 3166-2:VA": 98,
    "ISO 3166-2:HN": 99,
    "ISO 3166-2:HK": 100,
    "ISO 3166-2:HU": 101,
    "ISO 3166-2:IS": 102,
    "ISO 3166-2:IN": 103,
    "ISO 3166-2:ID": 104,
    "ISO 3166-2:IR": 105,
    "ISO 3166-2:IQ": 106,
    "ISO 3166-2:IE": 107,
    "ISO 3166-2:IM": 108,
    "ISO 3166-2:IL": 109,
    "ISO 3166-2:IT": 110,
    "ISO 3166-2:JM": 111,
    "ISO 3166-2:JP": 112,
    "ISO 3166-2:JE": 113,
    "ISO 3166-2:JO": 114,
    "ISO 3166-2:KZ": 115,
    "ISO 3166-2:KE": 116,
    "ISO 3166-2:KI": 117,
    "ISO 3166-2:KP": 118,
    "ISO 3166-2:KR": 119,
    "ISO 3166-2:KW": 120,
    "ISO 3166-2:KG": 121,
    "ISO 3166-2:LA": 122,
    "ISO 3166-2:LV": 123,
    "ISO 3166-2:LB": 124,
    "ISO 3166-2:LS": 125,
    "ISO 3166-2:LR": 126,
    "ISO 3166-2:LY": 127,
    "ISO 3166-2:LI": 128,
    "ISO 3166-2:LT": 129,
    "ISO 3166-2:LU": 130,
    "ISO 3166-2:MO": 131,
    "ISO 3166-2:MG": 132,
    "ISO 3166-2:MW": 133,
    "ISO 3166-2:MY": 134,
    "ISO 3166-2:MV": 135,
    "ISO 3166-2:ML": 136,
    "ISO 3166-2:MT": 137,
    "ISO 3166-2:MH": 138,
    "ISO 3166-2:MQ": 139,
    "ISO 3166-2:MR": 140,
    "ISO 3166-2:MU": 141,
    "ISO 3166-2:YT": 142,
    "ISO 3166-2:MX": 143,
    "ISO 3166-2:FM": 144,
    "ISO 3166-2:MD": 145,
    "ISO 3166-2:MC": 146,
    "ISO 3166-2:MN": 147,
    "ISO 3166-2:ME": 148,
    "ISO 3166-2:MS": 149,
    "ISO 3166-2:MA": 150,
    "ISO 3166-2:MZ": 151,
    "ISO 3166-2:MM": 152,
    "ISO 3166-2:NA": 153,
    "ISO 3166-2:NR": 154,
    "ISO 3166-2:NP": 155,
    "ISO 3166-2:NL": 156,
    "ISO 3166-2:NC": 157,
    "ISO 3166-2:NZ": 158,
    "ISO 3166-2:NI": 159,
    "ISO 3166-2:NE": 160,
    "ISO 3166-2:NG": 161,
    "ISO 3166-2:NU": 162,
    "ISO 3166-2:NF": 163,
    "ISO 3166-2:MK": 164,
    "ISO 3166-2:MP": 165,
    "ISO 3166-2:NO": 166,
    "ISO 3166-2:OM": 167,
    "ISO 3166-2:PK": 168,
    "ISO 3166-2:PW": 169,
    "ISO 3166-2:PS": 170,
    "ISO 3166-2:PA": 171,
    "ISO 3166-2:PG": 172,
    "ISO 3166-2:PY": 173,
    "ISO 3166-2:PE": 174,
    "ISO 3166-2:PH": 175,
    "ISO 3166-2:PN": 176,
    "ISO 3166-2:PL": 177,
    "ISO 3166-2:PT": 178,
    "ISO 3166-2:PR": 179,
    "ISO 3166-2:QA": 180,
    "ISO 3166-2:RE": 181,
    "ISO 3166-2:RO": 182,
    "ISO 3166-2:RU": 183,
    "ISO 3166-2:RW": 184,
    "ISO 3166-2:BL": 185,
    "ISO 3166-2:SH": 186,
    "ISO 3166-2:KN": 187,
    "ISO 3166-2:LC": 188,
    "ISO 3166-2:MF": 189,
    "ISO 3166-2:PM": 190,
    "ISO 3166-2:VC": 191,
    "ISO 3166-2:WS": 192,
    "ISO 3166-2:SM": 193,
    "ISO 3166-2:ST": 194,
    "ISO 3166-2:SA": 195,
    "ISO 3166-2:SN": 196,
    "ISO 3166-2:RS": 197,
    "ISO 3166-2:SC": 198,
    "ISO 3166-2:SL": 199,
    "ISO 3166-2:SG": 200,
    "ISO 3166-2:SX": 201,
    "ISO 3166-2:SK": 202,
    "ISO 3166-2:SI": 203,
    "ISO 3166-2:SB": 204,
    "ISO 3166-2:SO": 205,
    "ISO 3166-2:ZA": 206,
    "ISO 3166-2:GS": 207,
    "ISO 3166-2:SS": 208,
    "ISO 3166-2:ES": 209,
    "ISO 3166-2:LK": 210,
    "ISO 3166-2:SD": 211,
    "ISO 3166-2:SR": 212,
    "ISO 3166-2:SJ": 213,
    "ISO 3166-2:SE": 214,
    "ISO 3166-2:CH": 215,
    "ISO 3166-2:SY": 216,
    "ISO 3166-2:TW": 217,
    "ISO 3166-2:TJ": 218,
    "ISO 3166-2:TZ": 219,
    "ISO 3166-2:TH": 220,
    "ISO 3166-2:TL": 221,
    "ISO 3166-2:TG": 222,
    "ISO 3166-2:TK": 223,
    "ISO 3166-2:TO": 224,
    "ISO 3166-2:TT": 225,
    "ISO 3166-2:TN": 226,
    "ISO 3166-2:TR": 227,
    "ISO 3166-2:TM": 228,
    "ISO 3166-2:TC": 229,
    "ISO 3166-2:TV": 230,
    "ISO 3166-2:UG": 231,
    "ISO 3166-2:UA": 232,
    "ISO 3166-2:AE": 233,
    "ISO 3166-2:GB": 234,
    "ISO 3166-2:US": 235,
    "ISO 3166-2:UM": 236,
    "ISO 3166-2:UY": 237,
    "ISO 3166-2:UZ": 238,
    "ISO 3166-2:VU": 239,
    "ISO 3166-2:VE": 240,
    "ISO 3166-2:VN": 241,
    "ISO 3166-2:VG": 242,
    "ISO 3166-2:VI": 243,
    "ISO 3166-2:WF": 244,
    "ISO 3166-2:EH": 245,
    "ISO 3166-2:YE": 246,
    "ISO 3166-2:ZM": 247,
    "ISO 3166-2:ZW": 248,
}

BY_CAPITAL: dict[str, int] = {
    "abu dhabi": 233,
    "abuja": 161,
    "accra": 84,
    "adamstown": 176,
    "addis ababa": 71,
    "algiers": 3,
    "alofi": 162,
    "amman": 114,
    "amsterdam": 156,
    "andorra la vella": 5,
    "ankara": 227,
    "antananarivo": 132,
    "apia": 192,
    "ashgabat": 228,
    "asmara": 68,
    "astana": 115,
    "asunción": 173,
    "athens": 86,
    "avarua": 52,
    "baghdad": 106,
    "baku": 15,
    "bamako": 136,
    "bandar seri begawan": 33,
    "bangkok": 220,
    "bangui": 42,
    "banjul": 81,
    "basse-terre": 89,
    "basseterre": 187,
    "beijing": 45,
    "beirut": 124,
    "belgrade": 197,
    "belmopan": 22,
    "berlin": 83,
    "bern": 215,
    "bishkek": 121,
    "bissau": 94,
    "bogotá": 48,
    "brasília": 31,
    "bratislava": 202,
    "brazzaville": 50,
    "bridgetown": 19,
    "brussels": 21,
    "bucharest": 182,
    "budapest": 101,
    "buenos aires": 10,
    "cairo": 65,
    "canberra": 13,
    "caracas": 240,
    "castries": 188,
    "cayenne": 77,
    "charlotte amalie": 243,
    "chişinău": 145,
    "cockburn town": 229,
    "colombo": 210,
    "conakry": 93,
    "copenhagen": 60,
    "dakar": 196,
    "damascus": 216,
    "dhaka": 18,
    "diego garcia": 32,
    "dili": 221,
    "djibouti": 61,
    "dodoma": 219,
    "doha": 180,
    "douglas": 108,
    "dublin": 107,
    "dushanbe": 218,
    "flying fish cove": 46,
    "fort-de-france": 139,
    "freetown": 199,
    "funafuti": 230,
    "gaborone": 29,
    "george town": 41,
    "georgetown": 95,
    "gibraltar": 85,
    "gitega": 36,
    "grytviken": 207,
    "guatemala city": 91,
    "gustavia": 185,
    "hagåtña": 90,
    "hamilton": 24,
    "hanoi": 241,
    "harare": 248,
    "havana": 56,
    "helsinki": 75,
    "hong kong": 100,
    "honiara": 204,
    "islamabad": 168,
    "jakarta": 104,
    "jamestown": 186,
    "jerusalem": 109,
    "juba": 208,
    "kabul": 0,
    "kampala": 231,
    "kathmandu": 155,
    "khartoum": 211,
    "kigali": 184,
    "kingston": 111,
    "kingstown": 191,
    "kinshasa": 51,
    "kralendijk": 27,
    "kuala lumpur": 134,
    "kuwait city": 120,
    "kyiv": 232,
    "laayoune": 245,
    "libreville": 80,
    "lilongwe": 133,
    "lima": 174,
    "lisbon": 178,
    "ljubljana": 203,
    "lomé": 222,
    "london": 234,
    "longyearbyen": 213,
    "luanda": 6,
    "lusaka": 247,
    "luxembourg": 130,
    "macao": 131,
    "madrid": 209,
    "majuro": 138,
    "malabo": 67,
    "malé": 135,
    "mamoudzou": 142,
    "managua": 159,
    "manama": 17,
    "manila": 175,
    "maputo": 151,
    "mariehamn": 1,
    "marigot": 189,
    "maseru": 125,
    "mata-utu": 244,
    "mbabane": 70,
    "melekeok": 169,
    "mexico city": 143,
    "minsk": 20,
    "mogadishu": 205,
    "monaco": 146,
    "monrovia": 126,
    "montevideo": 237,
    "moroni": 49,
    "moscow": 183,
    "muscat": 167,
    "n'djamena": 43,
    "nairobi": 116,
    "nassau": 16,
    "nay pyi taw": 152,
    "new delhi": 103,
    "niamey": 160,
    "nicosia": 58,
    "nouakchott": 140,
    "nouméa": 157,
    "nuku'alofa": 224,
    "nuuk": 87,
    "oranjestad": 12,
    "oslo": 166,
    "ottawa": 40,
    "ouagadougou": 35,
    "pago pago": 4,
    "palikir": 144,
    "panama city": 171,
    "papeete": 78,
    "paramaribo": 212,
    "paris": 76,
    "philipsburg": 201,
    "phnom penh": 38,
    "plymouth": 149,
    "podgorica": 148,
    "port louis": 141,
    "port moresby": 172,
    "port of spain": 225,
    "port vila": 239,
    "port-au-prince": 96,
    "port-aux-français": 79,
    "porto-novo": 23,
    "prague": 59,
    "praia": 37,
    "pretoria": 206,
    "pyongyang": 118,
    "quito": 64,
    "rabat": 150,
    "reykjavik": 102,
    "riga": 123,
    "riyadh": 195,
    "road town": 242,
    "rome": 110,
    "roseau": 62,
    "saint helier": 113,
    "saint-denis": 181,
    "saint-pierre": 190,
    "saipan": 165,
    "san josé": 53,
    "san juan": 179,
    "san marino": 193,
    "san salvador": 66,
    "sanaa": 246,
    "santiago": 44,
    "santo domingo": 63,
    "sarajevo": 28,
    "seoul": 119,
    "singapore": 200,
    "skopje": 164,
    "sofia": 34,
    "st peter port": 92,
    "st. george's": 88,
    "st. john's": 9,
    "stanley": 72,
    "stockholm": 214,
    "sucre": 26,
    "suva": 74,
    "são tomé": 194,
    "taipei": 217,
    "tallinn": 69,
    "tarawa": 117,
    "tashkent": 238,
    "tbilisi": 82,
    "tegucigalpa": 99,
    "tehran": 105,
    "the valley": 7,
    "thimphu": 25,
    "tirana": 2,
    "tokyo": 112,
    "tripoli": 127,
    "tunis": 226,
    "tórshavn": 73,
    "ulaanbaatar": 147,
    "vaduz": 128,
    "valletta": 137,
    "vatican city": 98,
    "victoria": 198,
    "vienna": 14,
    "vientiane": 122,
    "vilnius": 129,
    "warsaw": 177,
    "washington": 235,
    "wellington": 158,
    "west island": 47,
    "willemstad": 57,
    "windhoek": 153,
    "yamoussoukro": 54,
    "yaoundé": 39,
    "yaren": 154,
    "yerevan": 11,
    "zagreb": 55,
}
